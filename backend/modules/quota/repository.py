"""
Quota repository for database access.

Encapsulates the Supabase queries for:
- user_daily_swipes
- premium_subscriptions
- consume_daily_swipe (Postgres function, see migrations/001_discover.sql)
"""

from datetime import date, datetime
from typing import Optional

from shared.repository import BaseRepository
from .models import QuotaRecord, DEFAULT_DAILY_LIMIT


class QuotaRepository(BaseRepository[QuotaRecord]):
    """
    Repository for daily swipe records.

    The conditional increment runs inside Postgres so two devices swiping
    at the same time cannot both pass the limit check.
    """

    def has_active_premium(self, user_id: str, now: datetime) -> bool:
        """Check for an active premium subscription that has not expired."""
        result = (
            self._db.table("premium_subscriptions")
            .select("status, expires_at")
            .eq("user_id", user_id)
            .eq("status", "active")
            .gt("expires_at", now.isoformat())
            .limit(1)
            .execute()
        )
        return bool(result.data)

    def get_record(self, user_id: str, swipe_date: date) -> Optional[QuotaRecord]:
        """Get the record for one day, or None if no swipe happened yet."""
        result = (
            self._db.table("user_daily_swipes")
            .select("user_id, swipe_date, swipes_used, daily_limit, is_premium")
            .eq("user_id", user_id)
            .eq("swipe_date", swipe_date.isoformat())
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def consume(
        self,
        user_id: str,
        swipe_date: date,
        daily_limit: int,
        is_premium: bool,
    ) -> tuple[bool, QuotaRecord]:
        """
        Atomically create-if-missing and conditionally increment.

        Args:
            user_id: The user's ID.
            swipe_date: Calendar day being charged.
            daily_limit: Limit used when the day's record is created.
            is_premium: Premium users bypass the limit check.

        Returns:
            Tuple of (granted, record after the call).
        """
        result = self._db.rpc(
            "consume_daily_swipe",
            {
                "p_user_id": user_id,
                "p_swipe_date": swipe_date.isoformat(),
                "p_daily_limit": daily_limit,
                "p_is_premium": is_premium,
            },
        ).execute()

        rows = result.data or []
        if isinstance(rows, dict):
            rows = [rows]
        if not rows:
            raise ValueError("consume_daily_swipe returned no rows")

        row = rows[0]
        record = QuotaRecord(
            user_id=user_id,
            swipe_date=swipe_date,
            swipes_used=row["swipes_used"],
            daily_limit=row["daily_limit"],
            is_premium=row.get("is_premium", is_premium),
        )
        return bool(row["granted"]), record

    def _map_to_record(self, data: dict) -> QuotaRecord:
        return QuotaRecord(
            user_id=data["user_id"],
            swipe_date=date.fromisoformat(str(data["swipe_date"])),
            swipes_used=data.get("swipes_used") or 0,
            daily_limit=data.get("daily_limit") or DEFAULT_DAILY_LIMIT,
            is_premium=bool(data.get("is_premium")),
        )
