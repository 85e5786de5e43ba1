"""
Discover route request models.

Response shapes come from the quota and exclusions modules.
"""

from pydantic import AliasChoices, BaseModel, Field


MAX_DECK_LIMIT = 50
DEFAULT_DECK_LIMIT = 30


class SkipDramaRequest(BaseModel):
    """Request to hide a title from discovery for the skip window."""

    drama_id: int = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("drama_id", "dramaId"),
        description="Catalog ID of the skipped title",
    )
