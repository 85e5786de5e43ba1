"""
Candidate sourcing module.

Public API:
- ICandidateSourcer: Interface for candidate sourcing
- CandidateSourcer: Catalog-backed implementation
- FALLBACK_POOL: Hand-curated IDs used when the live pool is exhausted
"""

from .interfaces import ICandidateSourcer
from .service import CandidateSourcer, FALLBACK_POOL, DEFAULT_POPULAR_PAGES

__all__ = [
    "ICandidateSourcer",
    "CandidateSourcer",
    "FALLBACK_POOL",
    "DEFAULT_POPULAR_PAGES",
]
