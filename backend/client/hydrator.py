"""
Deck hydration.

Turns candidate IDs into DeckItems by fetching detail records from the
catalog in small concurrent batches:

* Each batch fetches at most ``batch_size`` items at once.
* Each fetch has its own timeout. A timed-out fetch is retried once with
  no ceiling; any other failure, or a failed retry, drops just that item.
* Batches run one after another with a short pause in between.

A partly failed batch is normal: the deck is simply shorter. Results are
cached per ID sequence because catalog metadata changes far more slowly
than a session lives.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Sequence

from providers.base import CatalogItem, CatalogProvider
from providers.exceptions import CatalogFetchError, CatalogTimeoutError

from .config import DeckConfig
from .models import DeckItem

logger = logging.getLogger(__name__)


class DeckHydrator:
    """Fetches and caches display details for candidate IDs."""

    def __init__(
        self,
        catalog: CatalogProvider,
        config: Optional[DeckConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._catalog = catalog
        self._config = config or DeckConfig.default()
        self._clock = clock
        self._sleep = sleep
        self._cache: dict[tuple[int, ...], tuple[float, list[CatalogItem]]] = {}

    def invalidate(self) -> None:
        """Drop every cached hydration result."""
        self._cache.clear()

    def _cached(self, key: tuple[int, ...]) -> Optional[list[CatalogItem]]:
        entry = self._cache.get(key)
        if entry is None:
            return None
        stored_at, items = entry
        if self._clock() - stored_at >= self._config.cache_ttl_seconds:
            del self._cache[key]
            return None
        return items

    async def hydrate(
        self,
        catalog_ids: Sequence[int],
        start_position: int = 0,
    ) -> list[DeckItem]:
        """
        Hydrate IDs into deck items, preserving their relative order.

        Args:
            catalog_ids: Candidate IDs in deck order
            start_position: Position given to the first returned item

        Returns:
            DeckItems for every ID that could be fetched
        """
        key = tuple(catalog_ids)
        items = self._cached(key)
        if items is None:
            items = await self._fetch_all(key)
            if items:
                self._cache[key] = (self._clock(), items)
        else:
            logger.debug(f"Serving {len(items)} hydrated dramas from cache")

        return [
            DeckItem.from_catalog(item, start_position + offset)
            for offset, item in enumerate(items)
        ]

    async def _fetch_all(self, catalog_ids: Sequence[int]) -> list[CatalogItem]:
        if not catalog_ids:
            return []

        size = self._config.batch_size
        batches = [catalog_ids[i : i + size] for i in range(0, len(catalog_ids), size)]

        items: list[CatalogItem] = []
        for index, batch in enumerate(batches):
            results = await asyncio.gather(*(self._fetch_one(cid) for cid in batch))
            items.extend(item for item in results if item is not None)

            if index < len(batches) - 1 and self._config.inter_batch_delay > 0:
                await self._sleep(self._config.inter_batch_delay)

        logger.info(f"Hydrated {len(items)} of {len(catalog_ids)} dramas")
        return items

    async def _fetch_one(self, catalog_id: int) -> Optional[CatalogItem]:
        try:
            return await asyncio.wait_for(
                self._catalog.get_item(catalog_id),
                timeout=self._config.per_item_timeout,
            )
        except (asyncio.TimeoutError, CatalogTimeoutError):
            logger.warning(f"Request timeout for drama {catalog_id}, retrying...")
        except CatalogFetchError as e:
            logger.error(f"Error fetching drama {catalog_id}: {e}")
            return None
        except Exception:
            logger.exception(f"Unexpected error fetching drama {catalog_id}")
            return None

        try:
            return await self._catalog.get_item(catalog_id, timeout=None)
        except CatalogFetchError as e:
            logger.error(f"Retry failed for drama {catalog_id}: {e}")
            return None
        except Exception:
            logger.exception(f"Unexpected error retrying drama {catalog_id}")
            return None
