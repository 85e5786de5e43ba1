"""
Swipe session orchestration.

One SwipeSession exists per mounted discover screen. It owns the deck,
the cursor and the in-flight flag, and processes swipes optimistically:

1. ``swipe()`` checks the entry guard, moves the cursor forward at once
   and schedules the settle phase as a background task, so the UI never
   waits on the network.
2. The settle phase asks the server to consume a swipe. A denial rolls
   the cursor back and shows the limit prompt. A grant is final: the list
   write or skip that follows, and any deck extension, may fail without
   undoing the swipe.
3. ``in_flight`` stays set until ``settle_delay`` after the settle phase
   ends, which absorbs double taps.

State walk for one swipe::

    IDLE -> EVALUATING -> ADVANCING -> SETTLING -> GRANTED -> IDLE
                                               \\-> DENIED -> SHOWING_LIMIT_PROMPT
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from modules.quota.models import SwipeGrant, SwipeStatus
from shared.exceptions import DramaDeckError

from .config import DeckConfig
from .exceptions import DiscoverApiError
from .hydrator import DeckHydrator
from .interfaces import IDiscoverApi, IListWriter
from .models import DeckItem, SwipeDirection, SwipeState

logger = logging.getLogger(__name__)

WATCHLIST = "watchlist"


class SwipeSession:
    """Interactive discovery session for one screen."""

    def __init__(
        self,
        api: IDiscoverApi,
        hydrator: DeckHydrator,
        lists: IListWriter,
        config: Optional[DeckConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._api = api
        self._hydrator = hydrator
        self._lists = lists
        self._config = config or DeckConfig.default()
        self._sleep = sleep

        self.deck: list[DeckItem] = []
        self.cursor = 0
        self.in_flight = False
        self.state = SwipeState.IDLE
        self.quota: SwipeStatus = SwipeStatus.permissive()
        self.load_failed = False

        self._cached_deck: list[DeckItem] = []
        self._settle_task: Optional[asyncio.Task] = None
        self._extend_task: Optional[asyncio.Task] = None
        self._closed = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def start(self) -> None:
        """Load the quota status and the first deck."""
        await self.refresh_status()
        await self.refresh()

    async def refresh_status(self) -> None:
        """Reload the quota snapshot; keeps the old one on failure."""
        try:
            self.quota = await self._api.get_status()
        except DiscoverApiError as e:
            logger.warning(f"Could not load swipe status: {e.message}")

    async def refresh(self) -> None:
        """
        Discard cached hydration and reload the deck from the start.

        Skipped while a swipe is in flight, since a denial restores the
        cursor into the current deck.
        """
        if self.in_flight:
            logger.debug("Swipe in flight, skipping deck refresh")
            return

        self._hydrator.invalidate()
        deck = await self._load_deck(start_position=0)
        if deck:
            self.deck = deck
            self._cached_deck = list(deck)
        else:
            self.deck = list(self._cached_deck)
        self.cursor = 0
        self.load_failed = not self.deck

    def close(self) -> None:
        """
        Tear the session down with the screen.

        Pending settle and extension tasks are cancelled; nothing is
        rolled back.
        """
        self._closed = True
        for task in (self._settle_task, self._extend_task):
            if task is not None and not task.done():
                task.cancel()
        self.in_flight = False
        self.state = SwipeState.IDLE

    # -------------------------------------------------------------------------
    # Deck access
    # -------------------------------------------------------------------------

    @property
    def current_item(self) -> Optional[DeckItem]:
        if 0 <= self.cursor < len(self.deck):
            return self.deck[self.cursor]
        return None

    @property
    def next_item(self) -> Optional[DeckItem]:
        if 0 <= self.cursor + 1 < len(self.deck):
            return self.deck[self.cursor + 1]
        return None

    @property
    def limit_prompt_visible(self) -> bool:
        return self.state == SwipeState.SHOWING_LIMIT_PROMPT

    @property
    def extension_task(self) -> Optional[asyncio.Task]:
        return self._extend_task

    def dismiss_limit_prompt(self) -> None:
        if self.state == SwipeState.SHOWING_LIMIT_PROMPT:
            self.state = SwipeState.IDLE

    # -------------------------------------------------------------------------
    # Swiping
    # -------------------------------------------------------------------------

    def swipe(self, direction: SwipeDirection) -> Optional[asyncio.Task]:
        """
        Start a swipe on the current card.

        Must be called from inside a running event loop.

        Returns:
            The background settle task, or None if the swipe was rejected
            by the entry guard.
        """
        if self._closed:
            return None

        if self.in_flight:
            logger.debug("Swipe already in progress, ignoring")
            return None

        if not self.quota.can_swipe:
            logger.info("Swipe limit reached, showing limit prompt")
            self.state = SwipeState.SHOWING_LIMIT_PROMPT
            return None

        item = self.current_item
        if item is None:
            logger.debug("No current drama available")
            return None

        self.in_flight = True
        self.state = SwipeState.EVALUATING
        previous_cursor = self.cursor

        self.cursor += 1
        self.state = SwipeState.ADVANCING

        self._settle_task = asyncio.create_task(
            self._settle(item, direction, previous_cursor)
        )
        return self._settle_task

    async def _settle(
        self,
        item: DeckItem,
        direction: SwipeDirection,
        previous_cursor: int,
    ) -> None:
        try:
            self.state = SwipeState.SETTLING
            try:
                grant = await self._api.consume_swipe()
            except DiscoverApiError as e:
                # Fail open: keep the advance, skip side effects
                logger.error(f"Swipe check failed for drama {item.catalog_id}: {e.message}")
                self.state = SwipeState.IDLE
            else:
                if grant.granted:
                    self._apply_grant(grant)
                    await self._commit(item, direction)
                    self._maybe_extend()
                    self.state = SwipeState.IDLE
                else:
                    self._apply_denial(grant, previous_cursor)

            await self._sleep(self._config.settle_delay)
        finally:
            self.in_flight = False

    def _apply_grant(self, grant: SwipeGrant) -> None:
        self.state = SwipeState.GRANTED
        self.quota = SwipeStatus(
            swipes_used=grant.swipes_used,
            daily_limit=grant.daily_limit,
            remaining_swipes=grant.remaining_swipes,
            can_swipe=grant.can_swipe,
            is_premium=grant.is_premium,
        )

    def _apply_denial(self, grant: SwipeGrant, previous_cursor: int) -> None:
        self.state = SwipeState.DENIED
        self.cursor = previous_cursor
        self.quota = SwipeStatus(
            swipes_used=grant.swipes_used,
            daily_limit=grant.daily_limit,
            remaining_swipes=0,
            can_swipe=False,
            is_premium=grant.is_premium,
        )
        logger.info("Swipe denied, restoring card and showing limit prompt")
        self.state = SwipeState.SHOWING_LIMIT_PROMPT

    async def _commit(self, item: DeckItem, direction: SwipeDirection) -> None:
        """Run the swipe's side effect. Failures are logged, never undone."""
        try:
            if direction == SwipeDirection.RIGHT:
                await self._lists.add_to_list(item.catalog_id, WATCHLIST, item.list_metadata())
                logger.debug(f"Added {item.title} to watchlist")
            else:
                await self._api.skip_drama(item.catalog_id)
                logger.debug(f"Skipped {item.title}")
        except DramaDeckError as e:
            logger.error(f"Swipe side effect failed for drama {item.catalog_id}: {e.message}")

    # -------------------------------------------------------------------------
    # Deck loading
    # -------------------------------------------------------------------------

    async def _load_deck(self, start_position: int) -> list[DeckItem]:
        try:
            candidate_ids = await self._api.get_candidates(self._config.deck_size)
        except DiscoverApiError as e:
            logger.warning(f"Could not load discover candidates: {e.message}")
            return []
        return await self._hydrator.hydrate(candidate_ids, start_position=start_position)

    def _maybe_extend(self) -> None:
        if self.cursor < len(self.deck) - self._config.refetch_threshold:
            return
        if self._extend_task is not None and not self._extend_task.done():
            logger.debug("Deck extension already running")
            return
        logger.debug("Getting close to end, fetching more dramas...")
        self._extend_task = asyncio.create_task(self._extend())

    async def _extend(self) -> None:
        if self._config.refetch_debounce > 0:
            await self._sleep(self._config.refetch_debounce)

        try:
            candidate_ids = await self._api.get_candidates(self._config.deck_size)
        except DiscoverApiError as e:
            logger.warning(f"Could not extend deck: {e.message}")
            return

        seen = {item.catalog_id for item in self.deck}
        fresh = [catalog_id for catalog_id in candidate_ids if catalog_id not in seen]
        if not fresh:
            logger.debug("No new dramas to extend the deck with")
            return

        items = await self._hydrator.hydrate(fresh, start_position=len(self.deck))
        self.deck.extend(items)
        self._cached_deck = list(self.deck)
        logger.info(f"Extended deck by {len(items)} dramas")
