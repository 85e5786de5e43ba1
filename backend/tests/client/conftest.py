"""
Fakes for swipe client tests.
"""

import asyncio
from typing import Any, Optional

import pytest

from client.config import DeckConfig
from modules.quota.models import SwipeGrant, SwipeStatus
from providers.base import CatalogItem, CatalogProvider


class FakeCatalog(CatalogProvider):
    """
    Catalog with scripted per-ID behaviour.

    ``failures`` maps an ID to the exception raised on the first attempt;
    ``retry_failures`` to the one raised when retried without a ceiling.
    ``delays`` makes the first attempt sleep before answering.
    """

    def __init__(self):
        self.failures: dict[int, Exception] = {}
        self.retry_failures: dict[int, Exception] = {}
        self.delays: dict[int, float] = {}
        self.calls: list[tuple[int, Any]] = []
        self.active = 0
        self.max_active = 0

    async def discover_popular_ids(self, page: int) -> list[int]:
        return []

    async def get_item(self, catalog_id, timeout="default") -> CatalogItem:
        self.calls.append((catalog_id, timeout))
        retry = timeout is None
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if not retry and catalog_id in self.delays:
                await asyncio.sleep(self.delays[catalog_id])
            else:
                await asyncio.sleep(0)
            failures = self.retry_failures if retry else self.failures
            if catalog_id in failures:
                raise failures[catalog_id]
            return CatalogItem(
                id=catalog_id,
                name=f"Drama {catalog_id}",
                poster_path=f"/{catalog_id}.jpg",
                first_air_date="2020-01-01",
                number_of_episodes=16,
            )
        finally:
            self.active -= 1

    def attempts(self, catalog_id: int) -> int:
        return sum(1 for cid, _ in self.calls if cid == catalog_id)


class FakeDiscoverApi:
    """In-process stand-in for the discover endpoints."""

    def __init__(self, daily_limit: int = 20):
        self.daily_limit = daily_limit
        self.used = 0
        self.candidate_batches: list[list[int]] = []
        self.candidate_requests: list[int] = []
        self.skips: list[int] = []
        self.consume_error: Optional[Exception] = None
        self.candidates_error: Optional[Exception] = None
        self.skip_error: Optional[Exception] = None
        self.status_error: Optional[Exception] = None

    async def get_status(self) -> SwipeStatus:
        if self.status_error:
            raise self.status_error
        return SwipeStatus(
            swipes_used=self.used,
            daily_limit=self.daily_limit,
            remaining_swipes=max(0, self.daily_limit - self.used),
            can_swipe=self.used < self.daily_limit,
        )

    async def get_candidates(self, limit: int) -> list[int]:
        self.candidate_requests.append(limit)
        if self.candidates_error:
            raise self.candidates_error
        if not self.candidate_batches:
            return []
        return self.candidate_batches.pop(0)[:limit]

    async def consume_swipe(self) -> SwipeGrant:
        await asyncio.sleep(0)
        if self.consume_error:
            raise self.consume_error
        if self.used >= self.daily_limit:
            return SwipeGrant(
                success=False,
                swipes_used=self.used,
                daily_limit=self.daily_limit,
                remaining_swipes=0,
                message="Daily limit reached",
            )
        self.used += 1
        return SwipeGrant(
            success=True,
            swipes_used=self.used,
            daily_limit=self.daily_limit,
            remaining_swipes=self.daily_limit - self.used,
            message="Swipe successful",
        )

    async def skip_drama(self, drama_id: int) -> None:
        if self.skip_error:
            raise self.skip_error
        self.skips.append(drama_id)


class FakeListWriter:
    def __init__(self):
        self.writes: list[tuple[int, str, dict]] = []
        self.error: Optional[Exception] = None

    async def add_to_list(self, drama_id: int, list_type: str, metadata: dict) -> None:
        if self.error:
            raise self.error
        self.writes.append((drama_id, list_type, metadata))


class NoSleep:
    """Records requested sleeps and yields control once."""

    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def api() -> FakeDiscoverApi:
    return FakeDiscoverApi()


@pytest.fixture
def lists() -> FakeListWriter:
    return FakeListWriter()


@pytest.fixture
def no_sleep() -> NoSleep:
    return NoSleep()


@pytest.fixture
def fast_config() -> DeckConfig:
    return DeckConfig(per_item_timeout_ms=200, inter_batch_delay_ms=150, settle_delay_ms=300)

