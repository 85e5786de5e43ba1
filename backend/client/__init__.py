"""
Swipe client.

The app-side half of discovery: turns candidate IDs into a hydrated deck
and processes swipes optimistically against the discover API.

Public API:
- SwipeSession: Per-screen swipe orchestration
- DeckHydrator: Batched detail fetching with a TTL cache
- DeckConfig: Platform tuning presets
- DiscoverApiClient / SupabaseListWriter: Collaborator implementations
"""

from .config import DeckConfig
from .models import DeckItem, SwipeDirection, SwipeState
from .exceptions import DiscoverApiError, ListWriteError
from .interfaces import IDiscoverApi, IListWriter
from .api import DiscoverApiClient
from .lists import SupabaseListWriter
from .hydrator import DeckHydrator
from .session import SwipeSession

__all__ = [
    # Config
    "DeckConfig",
    # Models
    "DeckItem",
    "SwipeDirection",
    "SwipeState",
    # Exceptions
    "DiscoverApiError",
    "ListWriteError",
    # Interfaces
    "IDiscoverApi",
    "IListWriter",
    # Implementations
    "DiscoverApiClient",
    "SupabaseListWriter",
    "DeckHydrator",
    "SwipeSession",
]
