"""
Quota ledger data models.

These models define the per-day swipe accounting records and the
response shapes exposed to the discover routes and the client.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_DAILY_LIMIT = 20

# Returned as remaining_swipes for premium users
UNLIMITED_REMAINING = -1


class QuotaRecord(BaseModel):
    """
    Swipe usage for one user on one calendar day (UTC).

    Created lazily on the first swipe attempt of the day and superseded,
    never deleted, when the date rolls over.
    """

    user_id: str = Field(..., description="User ID")
    swipe_date: date = Field(..., description="Calendar day (UTC)")
    swipes_used: int = Field(default=0, ge=0, description="Swipes consumed today")
    daily_limit: int = Field(
        default=DEFAULT_DAILY_LIMIT,
        gt=0,
        description="Swipes allowed today for non-premium users",
    )
    is_premium: bool = Field(default=False, description="Premium at last consume")

    def remaining(self, is_premium: bool) -> int:
        """Swipes left today, or UNLIMITED_REMAINING for premium users."""
        if is_premium:
            return UNLIMITED_REMAINING
        return max(0, self.daily_limit - self.swipes_used)


class SwipeStatus(BaseModel):
    """Read-only quota status shown before any swipe happens."""

    swipes_used: int = Field(..., ge=0)
    daily_limit: int = Field(..., gt=0)
    remaining_swipes: int = Field(
        ...,
        description="Swipes left today (-1 means unlimited)",
    )
    can_swipe: bool
    is_premium: bool = False

    @classmethod
    def permissive(cls, daily_limit: int = DEFAULT_DAILY_LIMIT) -> "SwipeStatus":
        """Status returned when the ledger store cannot be read."""
        return cls(
            swipes_used=0,
            daily_limit=daily_limit,
            remaining_swipes=daily_limit,
            can_swipe=True,
            is_premium=False,
        )


class SwipeGrant(BaseModel):
    """
    Outcome of a check-and-consume call.

    A denied swipe is a normal value (success=False), not an error.
    """

    success: bool
    swipes_used: int = Field(..., ge=0)
    daily_limit: int = Field(..., gt=0)
    remaining_swipes: int
    is_premium: bool = False
    message: Optional[str] = None

    @property
    def granted(self) -> bool:
        return self.success

    @property
    def can_swipe(self) -> bool:
        """Whether another swipe would be granted after this one."""
        return self.is_premium or (self.success and self.remaining_swipes > 0)

    @classmethod
    def fallback(cls, daily_limit: int = DEFAULT_DAILY_LIMIT) -> "SwipeGrant":
        """Grant returned when the ledger store cannot be written."""
        return cls(
            success=True,
            swipes_used=1,
            daily_limit=daily_limit,
            remaining_swipes=max(0, daily_limit - 1),
            is_premium=False,
            message="Swipe successful (fallback)",
        )
