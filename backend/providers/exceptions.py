"""
Catalog provider exceptions.
"""

from shared.exceptions import ExternalServiceError


class CatalogFetchError(ExternalServiceError):
    """Raised when a catalog request fails."""

    def __init__(self, resource: str, message: str):
        super().__init__(
            f"Failed to fetch {resource} from catalog: {message}",
            service="catalog",
            code="CATALOG_FETCH_ERROR",
            details={"resource": resource, "error": message},
        )


class CatalogTimeoutError(CatalogFetchError):
    """Raised when a catalog request exceeds its timeout."""

    def __init__(self, resource: str):
        super().__init__(resource, "request timed out")
        self.code = "CATALOG_TIMEOUT"


class CatalogItemInvalidError(CatalogFetchError):
    """Raised when a catalog response is missing required fields."""

    def __init__(self, catalog_id: int, message: str):
        super().__init__(f"item {catalog_id}", f"invalid response: {message}")
        self.code = "CATALOG_ITEM_INVALID"
