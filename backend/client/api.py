"""
HTTP client for the discover endpoints.

Responses are validated into the quota models at the boundary, so the
session never sees a partially filled status.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from modules.quota.models import SwipeGrant, SwipeStatus

from .exceptions import DiscoverApiError

logger = logging.getLogger(__name__)


class DiscoverApiClient:
    """
    Async client for ``/api/discover``.

    Quota and skip calls carry no timeout by default; the server answers
    them from a single table lookup.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. ``https://api.example.com``
            access_token: Supabase access token for the signed-in user
            timeout: Optional request timeout in seconds
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=f"{self._base_url}/api/discover",
                headers={"Authorization": f"Bearer {self._access_token}"},
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise DiscoverApiError(operation, str(e), e.response.status_code) from e
        except httpx.HTTPError as e:
            raise DiscoverApiError(operation, str(e)) from e
        except ValueError as e:
            raise DiscoverApiError(operation, f"invalid JSON: {e}") from e

    async def get_status(self) -> SwipeStatus:
        data = await self._request("get_status", "GET", "/swipes/status")
        try:
            return SwipeStatus.model_validate(data)
        except ValidationError as e:
            raise DiscoverApiError("get_status", f"invalid response: {e}") from e

    async def get_candidates(self, limit: int) -> list[int]:
        data = await self._request("get_candidates", "GET", "/dramas", params={"limit": limit})
        if not isinstance(data, list):
            raise DiscoverApiError("get_candidates", "expected a list of IDs")
        return [item for item in data if isinstance(item, int)]

    async def consume_swipe(self) -> SwipeGrant:
        data = await self._request("consume_swipe", "POST", "/swipes")
        try:
            return SwipeGrant.model_validate(data)
        except ValidationError as e:
            raise DiscoverApiError("consume_swipe", f"invalid response: {e}") from e

    async def skip_drama(self, drama_id: int) -> None:
        await self._request("skip_drama", "POST", "/skips", json={"drama_id": drama_id})

    async def clean_expired_skips(self) -> int:
        """Run the expired-skip maintenance operation. Returns the deleted count."""
        data = await self._request("clean_expired_skips", "POST", "/skips/clean-expired")
        return int(data.get("deleted_count", 0))
