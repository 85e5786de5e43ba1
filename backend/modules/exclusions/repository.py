"""
Exclusion repository for database access.

Encapsulates the Supabase queries for:
- user_drama_lists (read-only, owned by list management)
- user_skipped_dramas
- clean_expired_skipped_dramas (Postgres function)
"""

from datetime import datetime

from shared.repository import BaseRepository
from .models import SkipEntry


class ExclusionRepository(BaseRepository[SkipEntry]):
    """Repository for list memberships and skip entries."""

    def list_membership_ids(self, user_id: str) -> set[int]:
        """Get IDs of every item in any of the user's lists."""
        result = (
            self._db.table("user_drama_lists")
            .select("drama_id")
            .eq("user_id", user_id)
            .execute()
        )
        return {row["drama_id"] for row in result.data or []}

    def active_skip_ids(self, user_id: str, now: datetime) -> set[int]:
        """Get IDs skipped by the user whose window has not ended."""
        result = (
            self._db.table("user_skipped_dramas")
            .select("drama_id")
            .eq("user_id", user_id)
            .gte("expires_at", now.isoformat())
            .execute()
        )
        return {row["drama_id"] for row in result.data or []}

    def upsert_skip(self, entry: SkipEntry) -> None:
        """Insert a skip, or refresh its window if one exists."""
        self._db.table("user_skipped_dramas").upsert(
            {
                "user_id": entry.user_id,
                "drama_id": entry.drama_id,
                "skipped_at": entry.skipped_at.isoformat(),
                "expires_at": entry.expires_at.isoformat(),
            },
            on_conflict="user_id,drama_id",
        ).execute()

    def delete_expired(self) -> int:
        """Delete expired skips and return how many were removed."""
        result = self._db.rpc("clean_expired_skipped_dramas", {}).execute()
        return int(result.data or 0)
