"""
Swipe client collaborator interfaces.

The swipe session depends on these protocols, not on the HTTP or
Supabase implementations, so tests can drive it with fakes.
"""

from typing import Any, Protocol, runtime_checkable

from modules.quota.models import SwipeGrant, SwipeStatus


@runtime_checkable
class IDiscoverApi(Protocol):
    """Server operations used by the swipe session."""

    async def get_status(self) -> SwipeStatus:
        """Get today's swipe status. Raises DiscoverApiError on failure."""
        ...

    async def get_candidates(self, limit: int) -> list[int]:
        """Get shuffled candidate IDs. Raises DiscoverApiError on failure."""
        ...

    async def consume_swipe(self) -> SwipeGrant:
        """Consume one swipe. Raises DiscoverApiError on failure."""
        ...

    async def skip_drama(self, drama_id: int) -> None:
        """Hide a title for the skip window. Raises DiscoverApiError on failure."""
        ...


@runtime_checkable
class IListWriter(Protocol):
    """List-management collaborator used for accepted swipes."""

    async def add_to_list(
        self,
        drama_id: int,
        list_type: str,
        metadata: dict[str, Any],
    ) -> None:
        """
        Put a title in one of the user's lists.

        Raises:
            ListWriteError: If the write failed
        """
        ...
