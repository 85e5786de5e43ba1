"""
Tests for discover API endpoints.

Routes run against in-memory services injected through
dependency overrides.
"""

import random
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_candidate_sourcer,
    get_exclusion_resolver,
    get_quota_ledger,
)
from modules.candidates.service import CandidateSourcer
from modules.exclusions.exceptions import ExclusionStoreError
from modules.exclusions.service import ExclusionResolver
from modules.quota.service import QuotaLedger
from providers.base import CatalogItem, CatalogProvider
from tests.conftest import create_test_token


class StaticCatalog(CatalogProvider):
    def __init__(self, ids: list[int]):
        self.ids = ids

    async def discover_popular_ids(self, page: int) -> list[int]:
        return self.ids if page == 1 else []

    async def get_item(self, catalog_id, timeout=None) -> CatalogItem:
        return CatalogItem(id=catalog_id, name=f"Drama {catalog_id}")


@pytest.fixture
def ledger() -> QuotaLedger:
    return QuotaLedger(daily_limit=20)


@pytest.fixture
def exclusions() -> ExclusionResolver:
    return ExclusionResolver()


@pytest.fixture
def app(jwt_secret, ledger, exclusions):
    """Create a fresh app wired to in-memory services."""
    app = create_app()
    sourcer = CandidateSourcer(
        StaticCatalog([1, 2, 3, 4, 5]),
        exclusions,
        rng=random.Random(1),
    )
    app.dependency_overrides[get_quota_ledger] = lambda: ledger
    app.dependency_overrides[get_exclusion_resolver] = lambda: exclusions
    app.dependency_overrides[get_candidate_sourcer] = lambda: sourcer
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestSwipeStatus:
    """Tests for GET /api/discover/swipes/status"""

    def test_requires_auth(self, client):
        response = client.get("/api/discover/swipes/status")
        assert response.status_code == 401

    def test_fresh_user(self, client, auth_headers):
        response = client.get("/api/discover/swipes/status", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "swipes_used": 0,
            "daily_limit": 20,
            "remaining_swipes": 20,
            "can_swipe": True,
            "is_premium": False,
        }

    def test_premium_user(self, client, auth_headers, ledger, test_user_id):
        ledger.grant_premium(test_user_id, datetime(2100, 1, 1, tzinfo=timezone.utc))
        data = client.get("/api/discover/swipes/status", headers=auth_headers).json()
        assert data["is_premium"] is True
        assert data["remaining_swipes"] == -1


class TestIncrementSwipes:
    """Tests for POST /api/discover/swipes"""

    def test_consumes_one(self, client, auth_headers):
        response = client.post("/api/discover/swipes", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["swipes_used"] == 1
        assert data["remaining_swipes"] == 19

    def test_denied_is_not_an_error(self, client, auth_headers):
        for _ in range(20):
            client.post("/api/discover/swipes", headers=auth_headers)

        response = client.post("/api/discover/swipes", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Daily limit reached"
        status = client.get("/api/discover/swipes/status", headers=auth_headers).json()
        assert status["swipes_used"] == 20
        assert status["can_swipe"] is False

    def test_swipes_are_per_user(self, client, auth_headers):
        client.post("/api/discover/swipes", headers=auth_headers)
        other = {"Authorization": f"Bearer {create_test_token(user_id='other-user')}"}
        data = client.get("/api/discover/swipes/status", headers=other).json()
        assert data["swipes_used"] == 0


class TestGetDramas:
    """Tests for GET /api/discover/dramas"""

    def test_returns_shuffled_ids(self, client, auth_headers):
        response = client.get("/api/discover/dramas", headers=auth_headers)
        assert response.status_code == 200
        assert sorted(response.json()) == [1, 2, 3, 4, 5]

    def test_applies_exclusions(self, client, auth_headers, exclusions, test_user_id):
        exclusions.add_list_membership(test_user_id, 2)
        client.post("/api/discover/skips", json={"drama_id": 4}, headers=auth_headers)

        response = client.get("/api/discover/dramas", headers=auth_headers)

        assert sorted(response.json()) == [1, 3, 5]

    def test_limit(self, client, auth_headers):
        response = client.get("/api/discover/dramas", params={"limit": 2}, headers=auth_headers)
        assert len(response.json()) == 2

    @pytest.mark.parametrize("limit", [0, 51])
    def test_limit_out_of_range(self, client, auth_headers, limit):
        response = client.get("/api/discover/dramas", params={"limit": limit}, headers=auth_headers)
        assert response.status_code == 422


class TestSkipDrama:
    """Tests for POST /api/discover/skips"""

    def test_records_skip(self, client, auth_headers, exclusions, test_user_id):
        response = client.post("/api/discover/skips", json={"drama_id": 42}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert exclusions.get_skip(test_user_id, 42) is not None

    def test_accepts_camel_case(self, client, auth_headers, exclusions, test_user_id):
        response = client.post("/api/discover/skips", json={"dramaId": 42}, headers=auth_headers)
        assert response.status_code == 200
        assert exclusions.get_skip(test_user_id, 42) is not None

    def test_rejects_invalid_id(self, client, auth_headers):
        response = client.post("/api/discover/skips", json={"drama_id": 0}, headers=auth_headers)
        assert response.status_code == 422

    def test_store_failure_returns_502(self, app, auth_headers):
        broken = AsyncMock()
        broken.record_skip.side_effect = ExclusionStoreError("skip", "down")
        app.dependency_overrides[get_exclusion_resolver] = lambda: broken

        response = TestClient(app).post(
            "/api/discover/skips",
            json={"drama_id": 42},
            headers=auth_headers,
        )

        assert response.status_code == 502
        assert response.json()["detail"]["error"] == "EXCLUSION_STORE_ERROR"


class TestCleanExpired:
    """Tests for POST /api/discover/skips/clean-expired"""

    def test_returns_deleted_count(self, app, auth_headers):
        resolver = AsyncMock()
        resolver.purge_expired.return_value = 3
        app.dependency_overrides[get_exclusion_resolver] = lambda: resolver

        response = TestClient(app).post("/api/discover/skips/clean-expired", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted_count": 3}

    def test_requires_auth(self, client):
        response = client.post("/api/discover/skips/clean-expired")
        assert response.status_code == 401
