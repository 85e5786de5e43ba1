"""
Quota ledger implementations.

Provides both in-memory (for testing and local development) and
Supabase-backed (for production) daily swipe accounting.

Fail-open policy
----------------
Both public operations fail OPEN. If the store cannot be reached,
``get_status`` reports ``can_swipe=True`` with a full allowance and
``check_and_consume`` grants the swipe. Store failures are logged with a
stack trace and never raised to callers.
"""

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from .exceptions import QuotaStoreError
from .models import (
    DEFAULT_DAILY_LIMIT,
    QuotaRecord,
    SwipeGrant,
    SwipeStatus,
)
from .repository import QuotaRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuotaLedger:
    """
    Daily swipe ledger with in-memory storage.

    For testing and development. Use SupabaseQuotaLedger for production.
    Subclasses only override the storage hooks (``_is_premium``,
    ``_load_record``, ``_consume``); the policy lives here.
    """

    def __init__(
        self,
        daily_limit: int = DEFAULT_DAILY_LIMIT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the ledger.

        Args:
            daily_limit: Limit given to newly created day records.
            clock: Returns the current UTC time. Defaults to the system clock.
        """
        self._daily_limit = daily_limit
        self._clock = clock or _utcnow
        self._records: dict[tuple[str, date], QuotaRecord] = {}
        self._premium_grants: dict[str, datetime] = {}
        self._lock = asyncio.Lock()

    @property
    def daily_limit(self) -> int:
        return self._daily_limit

    def grant_premium(self, user_id: str, expires_at: datetime) -> None:
        """Give a user premium status until ``expires_at``."""
        self._premium_grants[user_id] = expires_at

    async def get_status(self, user_id: str) -> SwipeStatus:
        """Get today's status without consuming a swipe."""
        now = self._clock()
        try:
            is_premium = await self._is_premium(user_id, now)
            record = await self._load_record(user_id, now.date())
        except QuotaStoreError:
            logger.exception(
                f"Quota store unavailable reading status for {user_id}, "
                f"returning permissive status"
            )
            return SwipeStatus.permissive(self._daily_limit)

        if record is None:
            record = QuotaRecord(
                user_id=user_id,
                swipe_date=now.date(),
                daily_limit=self._daily_limit,
            )

        return SwipeStatus(
            swipes_used=record.swipes_used,
            daily_limit=record.daily_limit,
            remaining_swipes=record.remaining(is_premium),
            can_swipe=is_premium or record.swipes_used < record.daily_limit,
            is_premium=is_premium,
        )

    async def check_and_consume(self, user_id: str) -> SwipeGrant:
        """Consume one swipe if allowed. Never increments on denial."""
        now = self._clock()
        try:
            is_premium = await self._is_premium(user_id, now)
            granted, record = await self._consume(user_id, now.date(), is_premium)
        except QuotaStoreError:
            logger.exception(
                f"Quota store unavailable consuming swipe for {user_id}, "
                f"granting (fail-open)"
            )
            return SwipeGrant.fallback(self._daily_limit)

        if not granted:
            logger.info(
                f"Daily limit reached for {user_id}: "
                f"{record.swipes_used}/{record.daily_limit}"
            )
            return SwipeGrant(
                success=False,
                swipes_used=record.swipes_used,
                daily_limit=record.daily_limit,
                remaining_swipes=0,
                is_premium=is_premium,
                message="Daily limit reached",
            )

        logger.debug(
            f"Swipe granted for {user_id}: {record.swipes_used}/{record.daily_limit} "
            f"(premium={is_premium})"
        )
        return SwipeGrant(
            success=True,
            swipes_used=record.swipes_used,
            daily_limit=record.daily_limit,
            remaining_swipes=record.remaining(is_premium),
            is_premium=is_premium,
            message="Swipe successful",
        )

    # -------------------------------------------------------------------------
    # Storage hooks
    # -------------------------------------------------------------------------

    async def _is_premium(self, user_id: str, now: datetime) -> bool:
        expires_at = self._premium_grants.get(user_id)
        return expires_at is not None and expires_at > now

    async def _load_record(self, user_id: str, swipe_date: date) -> Optional[QuotaRecord]:
        record = self._records.get((user_id, swipe_date))
        return record.model_copy() if record else None

    async def _consume(
        self,
        user_id: str,
        swipe_date: date,
        is_premium: bool,
    ) -> tuple[bool, QuotaRecord]:
        async with self._lock:
            key = (user_id, swipe_date)
            record = self._records.get(key)
            if record is None:
                record = QuotaRecord(
                    user_id=user_id,
                    swipe_date=swipe_date,
                    daily_limit=self._daily_limit,
                )
                self._records[key] = record

            record.is_premium = is_premium
            if not is_premium and record.swipes_used >= record.daily_limit:
                return False, record.model_copy()

            record.swipes_used += 1
            return True, record.model_copy()


class SupabaseQuotaLedger(QuotaLedger):
    """
    Quota ledger with Supabase persistence.

    Extends the base QuotaLedger to store day records in Supabase while
    keeping the same policy. Every storage error is wrapped in
    QuotaStoreError so the base class can fail open.
    """

    def __init__(
        self,
        repository: QuotaRepository,
        daily_limit: int = DEFAULT_DAILY_LIMIT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(daily_limit=daily_limit, clock=clock)
        self._repository = repository

    async def _is_premium(self, user_id: str, now: datetime) -> bool:
        try:
            return self._repository.has_active_premium(user_id, now)
        except Exception as e:
            raise QuotaStoreError("premium_lookup", str(e)) from e

    async def _load_record(self, user_id: str, swipe_date: date) -> Optional[QuotaRecord]:
        try:
            return self._repository.get_record(user_id, swipe_date)
        except Exception as e:
            raise QuotaStoreError("read", str(e)) from e

    async def _consume(
        self,
        user_id: str,
        swipe_date: date,
        is_premium: bool,
    ) -> tuple[bool, QuotaRecord]:
        try:
            return self._repository.consume(
                user_id,
                swipe_date,
                self._daily_limit,
                is_premium,
            )
        except Exception as e:
            raise QuotaStoreError("consume", str(e)) from e
