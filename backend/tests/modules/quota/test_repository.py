"""Tests for the quota repository."""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

from modules.quota.repository import QuotaRepository


@pytest.fixture
def mock_db() -> MagicMock:
    return MagicMock()


class TestHasActivePremium:
    def test_active_subscription(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.gt.return_value.limit.return_value.execute.return_value.data = [
            {"status": "active", "expires_at": "2030-01-01T00:00:00Z"}
        ]
        now = datetime(2025, 3, 10, tzinfo=timezone.utc)

        assert QuotaRepository(mock_db).has_active_premium("user-123", now) is True
        mock_db.table.assert_called_once_with("premium_subscriptions")
        chain.gt.assert_called_once_with("expires_at", now.isoformat())

    def test_no_subscription(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.gt.return_value.limit.return_value.execute.return_value.data = []

        repo = QuotaRepository(mock_db)
        assert repo.has_active_premium("user-123", datetime.now(timezone.utc)) is False


class TestGetRecord:
    def test_maps_row(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.data = [
            {
                "user_id": "user-123",
                "swipe_date": "2025-03-10",
                "swipes_used": 4,
                "daily_limit": 20,
                "is_premium": False,
            }
        ]

        record = QuotaRepository(mock_db).get_record("user-123", date(2025, 3, 10))

        mock_db.table.assert_called_once_with("user_daily_swipes")
        assert record.swipes_used == 4
        assert record.swipe_date == date(2025, 3, 10)

    def test_missing_row(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.data = []

        assert QuotaRepository(mock_db).get_record("user-123", date(2025, 3, 10)) is None


class TestConsume:
    def test_calls_function(self, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = [
            {"granted": True, "swipes_used": 5, "daily_limit": 20, "is_premium": False}
        ]

        granted, record = QuotaRepository(mock_db).consume("user-123", date(2025, 3, 10), 20, False)

        mock_db.rpc.assert_called_once_with(
            "consume_daily_swipe",
            {
                "p_user_id": "user-123",
                "p_swipe_date": "2025-03-10",
                "p_daily_limit": 20,
                "p_is_premium": False,
            },
        )
        assert granted is True
        assert record.swipes_used == 5

    def test_denied(self, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = [
            {"granted": False, "swipes_used": 20, "daily_limit": 20, "is_premium": False}
        ]

        granted, record = QuotaRepository(mock_db).consume("user-123", date(2025, 3, 10), 20, False)

        assert granted is False
        assert record.swipes_used == 20

    def test_empty_result_raises(self, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = []

        with pytest.raises(ValueError):
            QuotaRepository(mock_db).consume("user-123", date(2025, 3, 10), 20, False)
