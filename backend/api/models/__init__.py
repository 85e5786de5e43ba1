"""API models package."""

from .user import TokenPayload
from .errors import ErrorResponse, StoreErrorResponse

__all__ = [
    "TokenPayload",
    "ErrorResponse",
    "StoreErrorResponse",
]
