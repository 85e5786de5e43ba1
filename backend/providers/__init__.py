"""Catalog provider implementations."""

from .base import CatalogGenre, CatalogItem, CatalogProvider
from .exceptions import CatalogFetchError, CatalogItemInvalidError, CatalogTimeoutError
from .factory import get_catalog_provider
from .tmdb import TMDBCatalogProvider

__all__ = [
    "CatalogGenre",
    "CatalogItem",
    "CatalogProvider",
    "CatalogFetchError",
    "CatalogItemInvalidError",
    "CatalogTimeoutError",
    "TMDBCatalogProvider",
    "get_catalog_provider",
]
