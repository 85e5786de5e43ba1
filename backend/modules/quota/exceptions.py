"""
Quota ledger module exceptions.
"""

from shared.exceptions import DramaDeckError, ExternalServiceError


class QuotaError(DramaDeckError):
    """Base exception for quota-related errors."""

    pass


class QuotaStoreError(QuotaError, ExternalServiceError):
    """Raised when the quota store cannot be read or written."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            f"Quota store {operation} failed: {message}",
            service="quota_store",
            code="QUOTA_STORE_ERROR",
            details={"operation": operation, "error": message},
        )
