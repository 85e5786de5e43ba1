"""
Exclusion resolver module.

Computes which catalog items a user must never be shown in discovery:
items in any of their lists plus items skipped in the last week.

Public API:
- IExclusionResolver: Interface for exclusion operations
- ExclusionResolver / SupabaseExclusionResolver: Implementations
- SkipEntry, SkipResult, PurgeResult: Models
"""

from .interfaces import IExclusionResolver
from .models import DEFAULT_SKIP_WINDOW, SkipEntry, SkipResult, PurgeResult
from .exceptions import ExclusionError, ExclusionStoreError
from .repository import ExclusionRepository
from .service import ExclusionResolver, SupabaseExclusionResolver

__all__ = [
    "IExclusionResolver",
    "DEFAULT_SKIP_WINDOW",
    "SkipEntry",
    "SkipResult",
    "PurgeResult",
    "ExclusionError",
    "ExclusionStoreError",
    "ExclusionRepository",
    "ExclusionResolver",
    "SupabaseExclusionResolver",
]
