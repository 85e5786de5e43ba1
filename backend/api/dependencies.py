"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations: Supabase-backed when
Supabase is configured, in-memory otherwise.
"""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.quota.interfaces import IQuotaLedger
    from modules.exclusions.interfaces import IExclusionResolver
    from modules.candidates.interfaces import ICandidateSourcer
    from providers.base import CatalogProvider

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._quota_ledger: "IQuotaLedger | None" = None
        self._exclusion_resolver: "IExclusionResolver | None" = None
        self._catalog: "CatalogProvider | None" = None
        self._candidate_sourcer: "ICandidateSourcer | None" = None

    @property
    def quota(self) -> "IQuotaLedger":
        """Get the quota ledger instance."""
        if self._quota_ledger is None:
            settings = get_settings()
            if settings.supabase_configured:
                from modules.quota.repository import QuotaRepository
                from modules.quota.service import SupabaseQuotaLedger
                from shared.database import get_supabase_client
                self._quota_ledger = SupabaseQuotaLedger(
                    QuotaRepository(get_supabase_client()),
                    daily_limit=settings.discover_daily_limit,
                )
            else:
                from modules.quota.service import QuotaLedger
                logger.warning("Supabase not configured, using in-memory quota ledger")
                self._quota_ledger = QuotaLedger(daily_limit=settings.discover_daily_limit)
        return self._quota_ledger

    @property
    def exclusions(self) -> "IExclusionResolver":
        """Get the exclusion resolver instance."""
        if self._exclusion_resolver is None:
            settings = get_settings()
            window = timedelta(days=settings.discover_skip_window_days)
            if settings.supabase_configured:
                from modules.exclusions.repository import ExclusionRepository
                from modules.exclusions.service import SupabaseExclusionResolver
                from shared.database import get_supabase_client
                self._exclusion_resolver = SupabaseExclusionResolver(
                    ExclusionRepository(get_supabase_client()),
                    skip_window=window,
                )
            else:
                from modules.exclusions.service import ExclusionResolver
                logger.warning("Supabase not configured, using in-memory exclusion resolver")
                self._exclusion_resolver = ExclusionResolver(skip_window=window)
        return self._exclusion_resolver

    @property
    def catalog(self) -> "CatalogProvider":
        """Get the catalog provider instance."""
        if self._catalog is None:
            from providers.factory import get_catalog_provider
            self._catalog = get_catalog_provider()
        return self._catalog

    @property
    def candidates(self) -> "ICandidateSourcer":
        """Get the candidate sourcer instance."""
        if self._candidate_sourcer is None:
            from modules.candidates.service import CandidateSourcer
            self._candidate_sourcer = CandidateSourcer(
                catalog=self.catalog,
                exclusions=self.exclusions,
                pages=get_settings().discover_popular_pages,
            )
        return self._candidate_sourcer

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._quota_ledger = None
        self._exclusion_resolver = None
        self._catalog = None
        self._candidate_sourcer = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_quota_ledger() -> "IQuotaLedger":
    """FastAPI dependency for the quota ledger."""
    return get_container().quota


def get_exclusion_resolver() -> "IExclusionResolver":
    """FastAPI dependency for the exclusion resolver."""
    return get_container().exclusions


def get_catalog_provider() -> "CatalogProvider":
    """FastAPI dependency for the catalog provider."""
    return get_container().catalog


def get_candidate_sourcer() -> "ICandidateSourcer":
    """FastAPI dependency for the candidate sourcer."""
    return get_container().candidates
