"""
Exclusion resolver module interface.

The candidate sourcer depends on IExclusionResolver to know which
catalog items a user must not be shown again.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IExclusionResolver(Protocol):
    """Interface for the per-user exclusion set."""

    async def get_excluded_ids(self, user_id: str) -> set[int]:
        """
        Get every catalog ID the user must not see in discovery.

        This is the union of items in any of the user's lists and items
        skipped within the suppression window. Expired skips are ignored
        even when they have not been purged yet.

        Args:
            user_id: Supabase user ID

        Returns:
            Set of excluded catalog IDs
        """
        ...

    async def record_skip(self, user_id: str, drama_id: int) -> None:
        """
        Suppress an item for the skip window. Idempotent.

        Raises:
            ExclusionStoreError: If the skip could not be stored
        """
        ...

    async def purge_expired(self) -> int:
        """
        Delete skip entries whose window has ended.

        Storage hygiene only; exclusion results do not depend on it.

        Returns:
            Number of deleted entries
        """
        ...
