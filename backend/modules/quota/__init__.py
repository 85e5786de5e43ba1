"""
Quota ledger module.

Tracks daily discovery swipes per user, enforces the free-tier limit and
lets premium users through.

Public API:
- IQuotaLedger: Interface for quota operations
- QuotaLedger / SupabaseQuotaLedger: Implementations
- QuotaRecord, SwipeStatus, SwipeGrant: Models
"""

from .interfaces import IQuotaLedger
from .models import (
    DEFAULT_DAILY_LIMIT,
    UNLIMITED_REMAINING,
    QuotaRecord,
    SwipeStatus,
    SwipeGrant,
)
from .exceptions import QuotaError, QuotaStoreError
from .repository import QuotaRepository
from .service import QuotaLedger, SupabaseQuotaLedger

__all__ = [
    # Interfaces
    "IQuotaLedger",
    # Models
    "DEFAULT_DAILY_LIMIT",
    "UNLIMITED_REMAINING",
    "QuotaRecord",
    "SwipeStatus",
    "SwipeGrant",
    # Exceptions
    "QuotaError",
    "QuotaStoreError",
    # Implementations
    "QuotaRepository",
    "QuotaLedger",
    "SupabaseQuotaLedger",
]
