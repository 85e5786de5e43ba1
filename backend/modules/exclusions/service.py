"""
Exclusion resolver implementations.

Provides both in-memory (for testing) and Supabase-backed (for production)
implementations of the per-user exclusion set.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .exceptions import ExclusionStoreError
from .models import DEFAULT_SKIP_WINDOW, SkipEntry
from .repository import ExclusionRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExclusionResolver:
    """
    Exclusion resolver with in-memory storage.

    For testing and development. Use SupabaseExclusionResolver for production.
    """

    def __init__(
        self,
        skip_window: timedelta = DEFAULT_SKIP_WINDOW,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            skip_window: How long a skipped item stays hidden.
            clock: Returns the current UTC time. Defaults to the system clock.
        """
        self._skip_window = skip_window
        self._clock = clock or _utcnow
        self._list_members: dict[str, set[int]] = {}
        self._skips: dict[tuple[str, int], SkipEntry] = {}

    def add_list_membership(self, user_id: str, drama_id: int) -> None:
        """Mark an item as present in one of the user's lists."""
        self._list_members.setdefault(user_id, set()).add(drama_id)

    def get_skip(self, user_id: str, drama_id: int) -> Optional[SkipEntry]:
        """Get the stored skip entry for a pair, active or not."""
        return self._skips.get((user_id, drama_id))

    async def get_excluded_ids(self, user_id: str) -> set[int]:
        """Union of list memberships and active skips."""
        now = self._clock()
        excluded: set[int] = set()

        try:
            listed = await self._list_membership_ids(user_id)
            excluded |= listed
        except ExclusionStoreError:
            logger.exception(f"Failed to load list memberships for {user_id}")
            listed = set()

        try:
            skipped = await self._active_skip_ids(user_id, now)
            excluded |= skipped
        except ExclusionStoreError:
            logger.exception(f"Failed to load skipped dramas for {user_id}")
            skipped = set()

        logger.debug(
            f"Excluding {len(excluded)} dramas for {user_id} "
            f"({len(listed)} listed, {len(skipped)} skipped)"
        )
        return excluded

    async def record_skip(self, user_id: str, drama_id: int) -> None:
        """Suppress an item, refreshing the window if already skipped."""
        now = self._clock()
        entry = SkipEntry(
            user_id=user_id,
            drama_id=drama_id,
            skipped_at=now,
            expires_at=now + self._skip_window,
        )
        await self._store_skip(entry)
        logger.debug(f"Skipped drama {drama_id} for {user_id} until {entry.expires_at}")

    async def purge_expired(self) -> int:
        """Delete expired skip entries."""
        deleted = await self._delete_expired(self._clock())
        logger.info(f"Purged {deleted} expired skipped dramas")
        return deleted

    # -------------------------------------------------------------------------
    # Storage hooks
    # -------------------------------------------------------------------------

    async def _list_membership_ids(self, user_id: str) -> set[int]:
        return set(self._list_members.get(user_id, set()))

    async def _active_skip_ids(self, user_id: str, now: datetime) -> set[int]:
        return {
            entry.drama_id
            for (owner, _), entry in self._skips.items()
            if owner == user_id and entry.is_active(now)
        }

    async def _store_skip(self, entry: SkipEntry) -> None:
        self._skips[(entry.user_id, entry.drama_id)] = entry

    async def _delete_expired(self, now: datetime) -> int:
        expired = [key for key, entry in self._skips.items() if entry.expires_at < now]
        for key in expired:
            del self._skips[key]
        return len(expired)


class SupabaseExclusionResolver(ExclusionResolver):
    """
    Exclusion resolver with Supabase persistence.

    Storage errors are wrapped in ExclusionStoreError. Reads degrade to an
    empty set for the failing source; writes propagate the error.
    """

    def __init__(
        self,
        repository: ExclusionRepository,
        skip_window: timedelta = DEFAULT_SKIP_WINDOW,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(skip_window=skip_window, clock=clock)
        self._repository = repository

    async def _list_membership_ids(self, user_id: str) -> set[int]:
        try:
            return self._repository.list_membership_ids(user_id)
        except Exception as e:
            raise ExclusionStoreError("list_lookup", str(e)) from e

    async def _active_skip_ids(self, user_id: str, now: datetime) -> set[int]:
        try:
            return self._repository.active_skip_ids(user_id, now)
        except Exception as e:
            raise ExclusionStoreError("skip_lookup", str(e)) from e

    async def _store_skip(self, entry: SkipEntry) -> None:
        try:
            self._repository.upsert_skip(entry)
        except Exception as e:
            raise ExclusionStoreError("skip", str(e)) from e

    async def _delete_expired(self, now: datetime) -> int:
        try:
            return self._repository.delete_expired()
        except Exception as e:
            raise ExclusionStoreError("purge", str(e)) from e
