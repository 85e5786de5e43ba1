"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class SkipRepository(BaseRepository[SkipEntry]):
            def list_active_ids(self, user_id: str, now: datetime) -> set[int]:
                result = (
                    self._db.table("user_skipped_dramas")
                    .select("drama_id")
                    .eq("user_id", user_id)
                    .gte("expires_at", now.isoformat())
                    .execute()
                )
                return {row["drama_id"] for row in result.data}
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

