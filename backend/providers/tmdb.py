"""TMDB catalog provider.

Talks to the TMDB v3 API:

* ``GET /discover/tv`` for the popular K-drama pages used by candidate
  sourcing, filtered by origin country and minimum rating.
* ``GET /tv/{id}`` for the detail records used to hydrate the deck.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .base import CatalogItem, CatalogProvider
from .exceptions import CatalogFetchError, CatalogItemInvalidError, CatalogTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class TMDBCatalogProvider(CatalogProvider):
    """Catalog provider backed by the TMDB HTTP API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        language: str = "pt-BR",
        origin_country: str = "KR",
        min_rating: float = 6.0,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the TMDB provider.

        Args:
            api_key: TMDB v3 API key
            base_url: API root
            language: Language for detail records
            origin_country: ISO country filter for the popular query
            min_rating: Minimum vote average for the popular query
            timeout: Default request timeout in seconds
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._origin_country = origin_country
        self._min_rating = min_rating
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def _get_json(
        self,
        resource: str,
        path: str,
        params: dict[str, Any],
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> dict:
        """GET a TMDB path and return the decoded JSON body."""
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    path,
                    params={"api_key": self._api_key, **params},
                    timeout=timeout,
                )
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise CatalogTimeoutError(resource) from e
        except httpx.HTTPError as e:
            raise CatalogFetchError(resource, str(e)) from e
        except ValueError as e:
            raise CatalogFetchError(resource, f"invalid JSON: {e}") from e

    async def discover_popular_ids(self, page: int) -> list[int]:
        """Fetch one page of popular titles and return their IDs."""
        data = await self._get_json(
            f"popular page {page}",
            "/discover/tv",
            {
                "with_origin_country": self._origin_country,
                "sort_by": "popularity.desc",
                "page": page,
                "vote_average.gte": self._min_rating,
            },
        )
        results = data.get("results", []) if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise CatalogFetchError(f"popular page {page}", "unexpected response shape")
        return [
            result["id"]
            for result in results
            if isinstance(result, dict) and isinstance(result.get("id"), int)
        ]

    async def get_item(self, catalog_id: int, timeout: Any = httpx.USE_CLIENT_DEFAULT) -> CatalogItem:
        """Fetch and validate the detail record for one title."""
        data = await self._get_json(
            f"item {catalog_id}",
            f"/tv/{catalog_id}",
            {"language": self._language},
            timeout=timeout,
        )
        try:
            return CatalogItem.model_validate(data)
        except ValidationError as e:
            raise CatalogItemInvalidError(catalog_id, str(e)) from e
