"""Factory functions for creating catalog providers."""

from typing import Optional

from shared.config import Settings, get_settings

from .base import CatalogProvider
from .tmdb import TMDBCatalogProvider


def get_catalog_provider(settings: Optional[Settings] = None) -> CatalogProvider:
    """Build the catalog provider from settings.

    Args:
        settings: Optional settings; defaults to the cached application settings.

    Returns:
        A TMDB-backed CatalogProvider
    """
    settings = settings or get_settings()
    return TMDBCatalogProvider(
        api_key=settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        language=settings.tmdb_language,
        origin_country=settings.discover_origin_country,
        min_rating=settings.discover_min_rating,
        timeout=settings.tmdb_timeout_seconds,
    )
