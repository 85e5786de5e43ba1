"""
Watchlist writes for accepted swipes.

List management belongs to another part of the app; this adapter only
performs the one write discovery needs, directly against Supabase with
the user's own token so Row Level Security applies.
"""

import logging
from datetime import date
from typing import Any, Optional

from supabase import Client

from shared.database import get_supabase_user_client

from .exceptions import ListWriteError

logger = logging.getLogger(__name__)

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
POSTER_SIZE = "w500"


def _year_from(first_air_date: Optional[str]) -> Optional[int]:
    if not first_air_date:
        return None
    try:
        return date.fromisoformat(first_air_date[:10]).year
    except ValueError:
        return None


class SupabaseListWriter:
    """Writes discovery picks into ``user_drama_lists``."""

    def __init__(self, db: Client, user_id: str):
        self._db = db
        self._user_id = user_id

    @classmethod
    def for_user(cls, access_token: str, user_id: str) -> "SupabaseListWriter":
        """Build a writer bound to the signed-in user's session."""
        return cls(get_supabase_user_client(access_token), user_id)

    def build_row(
        self,
        drama_id: int,
        list_type: str,
        metadata: dict[str, Any],
    ) -> dict[str, Any]:
        """Map card metadata to a list row."""
        poster_path = metadata.get("poster_path")
        return {
            "user_id": self._user_id,
            "drama_id": drama_id,
            "list_type": list_type,
            "drama_name": metadata.get("name"),
            "poster_image": f"{TMDB_IMAGE_BASE_URL}/{POSTER_SIZE}{poster_path}" if poster_path else None,
            "drama_year": _year_from(metadata.get("first_air_date")),
            "total_episodes": metadata.get("number_of_episodes"),
        }

    async def add_to_list(
        self,
        drama_id: int,
        list_type: str,
        metadata: dict[str, Any],
    ) -> None:
        """Insert the title, or move it if it is already in another list."""
        row = self.build_row(drama_id, list_type, metadata)
        try:
            self._db.table("user_drama_lists").upsert(
                row,
                on_conflict="user_id,drama_id",
            ).execute()
        except Exception as e:
            raise ListWriteError(drama_id, list_type, str(e)) from e
        logger.debug(f"Added drama {drama_id} to {list_type} for {self._user_id}")
