"""
Base exception classes for the DramaDeck backend.

Each module should define its own exceptions that inherit from these bases.
Routes translate them into HTTP responses through ``to_dict()``.
"""

from typing import Optional, Any


class DramaDeckError(Exception):
    """
    Base exception for all DramaDeck errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ExternalServiceError(DramaDeckError):
    """Error communicating with an external service (store, catalog)."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
