"""
Swipe client exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class DiscoverApiError(ExternalServiceError):
    """Raised when a discover endpoint call fails."""

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        super().__init__(
            f"Discover API {operation} failed: {message}",
            service="discover_api",
            code="DISCOVER_API_ERROR",
            details={"operation": operation, "error": message, "status_code": status_code},
        )
        self.status_code = status_code


class ListWriteError(ExternalServiceError):
    """Raised when an item could not be written to a user list."""

    def __init__(self, drama_id: int, list_type: str, message: str):
        super().__init__(
            f"Failed to add drama {drama_id} to {list_type}: {message}",
            service="lists",
            code="LIST_WRITE_ERROR",
            details={"drama_id": drama_id, "list_type": list_type, "error": message},
        )
