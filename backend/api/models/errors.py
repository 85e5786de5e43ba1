"""
Error response models.

Shape of the ``detail`` field returned when a store or catalog
dependency fails behind a discover endpoint.
"""

from pydantic import BaseModel
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format (DramaDeckError.to_dict())."""

    error: str
    message: str
    details: dict[str, Any] = {}


class StoreErrorResponse(BaseModel):
    """Body of a 502 raised when the skip store is unreachable."""

    detail: ErrorResponse
