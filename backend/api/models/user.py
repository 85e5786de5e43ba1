"""
Token models for authentication.

The authenticated user itself lives in shared.models.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class TokenPayload(BaseModel):
    """Supabase JWT token payload structure."""
    model_config = ConfigDict(extra="ignore")

    sub: str  # User ID
    email: str
    email_confirmed_at: Optional[str] = None
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
