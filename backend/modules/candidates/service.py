"""
Candidate sourcing service.

Builds the swipe deck's ID list:

1. Pull several pages of popular titles from the catalog, skipping pages
   that fail.
2. Deduplicate, keeping first occurrence.
3. Remove everything the exclusion resolver says the user must not see.
4. If nothing is left, fall back to a small hand-curated pool (minus
   exclusions) so the deck is not empty just because the catalog is.
5. Shuffle uniformly; popularity order is dropped on purpose so the head
   of the list is not always the same.
6. Truncate to the requested size.
"""

import logging
import random
from typing import Optional, Sequence

from modules.exclusions.interfaces import IExclusionResolver
from providers.base import CatalogProvider
from providers.exceptions import CatalogFetchError

logger = logging.getLogger(__name__)

DEFAULT_POPULAR_PAGES = 5

FALLBACK_POOL: tuple[int, ...] = (
    124834,
    83097,
    69050,
    100757,
    71712,
    85552,
    88329,
    95479,
)


class CandidateSourcer:
    """Produces randomized, exclusion-filtered candidate IDs for a user."""

    def __init__(
        self,
        catalog: CatalogProvider,
        exclusions: IExclusionResolver,
        pages: int = DEFAULT_POPULAR_PAGES,
        fallback_pool: Sequence[int] = FALLBACK_POOL,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the sourcer.

        Args:
            catalog: Catalog provider for the popular-titles query
            exclusions: Resolver for the user's exclusion set
            pages: Number of popular pages to pull
            fallback_pool: IDs used when the live pool is exhausted
            rng: Random source for the shuffle (tests pass a seeded one)
        """
        self._catalog = catalog
        self._exclusions = exclusions
        self._pages = pages
        self._fallback_pool = tuple(fallback_pool)
        self._rng = rng or random.Random()

    async def fetch_pool(self) -> list[int]:
        """Fetch and deduplicate the live pool across all pages."""
        if not self._catalog.is_configured:
            logger.warning("Catalog provider not configured, skipping live pool")
            return []

        pool: list[int] = []
        for page in range(1, self._pages + 1):
            try:
                pool.extend(await self._catalog.discover_popular_ids(page))
            except CatalogFetchError as e:
                logger.warning(f"Skipping catalog page {page}: {e.message}")

        unique = list(dict.fromkeys(pool))
        logger.debug(f"Fetched {len(pool)} catalog IDs ({len(unique)} unique)")
        return unique

    async def get_candidates(self, user_id: str, limit: int) -> list[int]:
        """Get up to ``limit`` shuffled candidate IDs for the user."""
        pool = await self.fetch_pool()
        excluded = await self._exclusions.get_excluded_ids(user_id)

        available = [catalog_id for catalog_id in pool if catalog_id not in excluded]
        if not available:
            logger.info(
                f"No live candidates left for {user_id} "
                f"(pool={len(pool)}, excluded={len(excluded)}), using fallback pool"
            )
            available = [
                catalog_id
                for catalog_id in self._fallback_pool
                if catalog_id not in excluded
            ]

        self._rng.shuffle(available)
        result = available[: max(0, limit)]
        logger.debug(f"Returning {len(result)} discover candidates for {user_id}")
        return result
