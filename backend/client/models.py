"""
Swipe client data models.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from providers.base import CatalogItem


class SwipeDirection(str, Enum):
    """Swipe gesture outcome."""

    RIGHT = "right"  # Add to watchlist
    LEFT = "left"    # Skip for a week


class SwipeState(str, Enum):
    """Where the session is in processing the current swipe."""

    IDLE = "idle"
    EVALUATING = "evaluating"
    ADVANCING = "advancing"
    SETTLING = "settling"
    GRANTED = "granted"
    DENIED = "denied"
    SHOWING_LIMIT_PROMPT = "showing_limit_prompt"


class DeckItem(BaseModel):
    """
    One hydrated card in the swipe deck.

    Ephemeral: lives only as long as the session, never persisted.
    """

    model_config = ConfigDict(frozen=True)

    catalog_id: int
    title: str
    position: int = Field(..., ge=0, description="Index in the session's sequence")
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    number_of_episodes: Optional[int] = None
    overview: Optional[str] = None

    @classmethod
    def from_catalog(cls, item: CatalogItem, position: int) -> "DeckItem":
        return cls(
            catalog_id=item.id,
            title=item.name,
            position=position,
            poster_path=item.poster_path,
            backdrop_path=item.backdrop_path,
            first_air_date=item.first_air_date,
            vote_average=item.vote_average,
            number_of_episodes=item.number_of_episodes,
            overview=item.overview,
        )

    def list_metadata(self) -> dict[str, Any]:
        """Metadata passed along when the card is added to a list."""
        return {
            "name": self.title,
            "poster_path": self.poster_path,
            "first_air_date": self.first_air_date,
            "number_of_episodes": self.number_of_episodes,
        }
