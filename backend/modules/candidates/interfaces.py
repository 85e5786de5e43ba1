"""
Candidate sourcing module interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ICandidateSourcer(Protocol):
    """Interface for building the discovery deck's ID list."""

    async def get_candidates(self, user_id: str, limit: int) -> list[int]:
        """
        Get shuffled catalog IDs the user has not listed or recently skipped.

        Never raises because the catalog is down: an exhausted or
        unreachable live source degrades to the fallback pool.

        Args:
            user_id: Supabase user ID
            limit: Maximum number of IDs to return

        Returns:
            Up to ``limit`` catalog IDs in random order
        """
        ...
