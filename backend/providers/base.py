"""Base classes and models for catalog providers."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogGenre(BaseModel):
    """A genre tag attached to a catalog item."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str


class CatalogItem(BaseModel):
    """Detail record for one catalog title.

    Validated at the provider boundary: a response without ``id`` or
    ``name`` is rejected instead of leaking empty fields into the deck.

    Attributes:
        id: Catalog ID (TMDB TV ID)
        name: Localized title
        poster_path: Relative artwork path, resolved by the image layer
        first_air_date: ISO date string, or None when unknown
        vote_average: Rating from 0 to 10
        number_of_episodes: Total episode count when known
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    original_name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    number_of_episodes: Optional[int] = None
    number_of_seasons: Optional[int] = None
    genres: list[CatalogGenre] = Field(default_factory=list)

    @field_validator("first_air_date", "overview", "poster_path", "backdrop_path", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CatalogProvider(ABC):
    """Abstract base class for catalog providers.

    The catalog is treated as unreliable: callers must expect timeouts,
    failed pages and empty results.
    """

    @property
    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs to make requests."""
        return True

    @abstractmethod
    async def discover_popular_ids(self, page: int) -> list[int]:
        """Return catalog IDs from one page of the popular-titles query.

        Args:
            page: 1-indexed page number

        Returns:
            IDs in popularity order (possibly empty)

        Raises:
            CatalogFetchError: If the page could not be fetched
        """
        pass

    @abstractmethod
    async def get_item(
        self,
        catalog_id: int,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> CatalogItem:
        """Fetch the detail record for one title.

        Args:
            catalog_id: Catalog ID
            timeout: Request timeout in seconds. Omit for the provider
                default; None disables the ceiling.

        Returns:
            The validated CatalogItem

        Raises:
            CatalogTimeoutError: If the request timed out
            CatalogFetchError: On any other transport or HTTP failure
            CatalogItemInvalidError: If the response lacks required fields
        """
        pass
