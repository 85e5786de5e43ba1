"""
Quota ledger module interface.

The discover routes and the candidate flow depend on IQuotaLedger,
not on the in-memory or Supabase implementation.
"""

from typing import Protocol, runtime_checkable

from .models import SwipeStatus, SwipeGrant


@runtime_checkable
class IQuotaLedger(Protocol):
    """
    Interface for daily swipe accounting.

    Both operations fail open: an unreachable store yields a permissive
    result rather than an exception.
    """

    async def get_status(self, user_id: str) -> SwipeStatus:
        """
        Get today's swipe status without consuming anything.

        Args:
            user_id: Supabase user ID

        Returns:
            SwipeStatus for today (a missing record reads as zero used)
        """
        ...

    async def check_and_consume(self, user_id: str) -> SwipeGrant:
        """
        Consume one swipe if the user is allowed one.

        The read-check-increment is atomic: concurrent calls can never
        push a non-premium user past the daily limit.

        Args:
            user_id: Supabase user ID

        Returns:
            SwipeGrant with success=False when the limit is reached
        """
        ...
