"""Tests for the maintenance CLI tasks."""

import pytest
from datetime import datetime, timedelta, timezone

import run_maintenance
from api.dependencies import get_container


class TestPurgeSkips:
    @pytest.mark.asyncio
    async def test_purges_through_container(self):
        resolver = get_container().exclusions
        resolver._clock = lambda: datetime.now(timezone.utc) - timedelta(days=30)
        await resolver.record_skip("user-123", 42)
        resolver._clock = lambda: datetime.now(timezone.utc)

        assert await run_maintenance.purge_skips() == 1
        assert resolver.get_skip("user-123", 42) is None


class TestShowQuota:
    @pytest.mark.asyncio
    async def test_prints_status(self, capsys):
        await get_container().quota.check_and_consume("user-123")

        await run_maintenance.show_quota("user-123")

        output = capsys.readouterr().out
        assert "Swipes used" in output
        assert "19" in output
