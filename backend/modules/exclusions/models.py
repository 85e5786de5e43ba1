"""
Exclusion resolver data models.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field


DEFAULT_SKIP_WINDOW = timedelta(days=7)


class SkipEntry(BaseModel):
    """
    A temporarily suppressed catalog item.

    At most one entry exists per (user_id, drama_id); skipping again
    refreshes the window. Entries past ``expires_at`` are inert until purged.
    """

    user_id: str = Field(..., description="User ID")
    drama_id: int = Field(..., description="Catalog item ID")
    skipped_at: datetime = Field(..., description="When the item was last skipped")
    expires_at: datetime = Field(..., description="When the suppression ends")

    def is_active(self, now: datetime) -> bool:
        return now <= self.expires_at


class SkipResult(BaseModel):
    """Response for a skip request."""

    success: bool = True


class PurgeResult(BaseModel):
    """Response for the expired-skip maintenance operation."""

    deleted_count: int = Field(..., ge=0)
