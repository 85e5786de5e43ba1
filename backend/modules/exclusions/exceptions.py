"""
Exclusion resolver module exceptions.
"""

from shared.exceptions import DramaDeckError, ExternalServiceError


class ExclusionError(DramaDeckError):
    """Base exception for exclusion-related errors."""

    pass


class ExclusionStoreError(ExclusionError, ExternalServiceError):
    """Raised when skip or list data cannot be read or written."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            f"Exclusion store {operation} failed: {message}",
            service="exclusion_store",
            code="EXCLUSION_STORE_ERROR",
            details={"operation": operation, "error": message},
        )
