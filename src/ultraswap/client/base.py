"""Shared HTTP plumbing for Ultra API clients.

Each call opens its own ``httpx.AsyncClient`` and makes a single attempt.
Non-2xx statuses become ``UpstreamError``; bodies that do not match the
expected contract become ``MalformedResponse``.
"""

import asyncio
import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ultraswap.config import UltraEndpoints, get_settings
from ultraswap.errors import (
    InvalidArgument,
    MalformedResponse,
    RequestCancelled,
    UltraClientError,
    UpstreamError,
)
from ultraswap.utils.cancellation import run_cancellable

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "BaseUltraClient",
    "UltraClientError",
    "InvalidArgument",
    "RequestCancelled",
    "UpstreamError",
    "MalformedResponse",
]


class BaseUltraClient:
    """Base class for clients of a single Ultra API resource."""

    name: str = "ultra"

    def __init__(
        self,
        endpoints: Optional[UltraEndpoints] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize client.

        Args:
            endpoints: Route table (defaults to the configured one)
            api_key: Optional API key for higher rate limits
            timeout: Request timeout in seconds (None = no timeout)
            transport: Custom httpx transport (used by tests)
        """
        if endpoints is None:
            endpoints = get_settings().endpoints()
        self.endpoints = endpoints
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def _send(
        self,
        method: str,
        url: str,
        operation: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> httpx.Response:
        logger.debug(f"{operation}: {method} {url} params={params}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._get_headers(),
                )
        except httpx.RequestError as e:
            logger.warning(f"{operation} transport error: {type(e).__name__}: {e}")
            raise UpstreamError(operation, None, reason=f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.warning(f"Ultra API error: {operation} {response.status_code} - {response.text}")
            raise UpstreamError(operation, response.status_code, response.text)

        return response

    async def _request(
        self,
        method: str,
        url: str,
        operation: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """Send one request, honouring the caller's cancel signal."""
        return await run_cancellable(
            self._send(method, url, operation, params=params, json=json),
            cancel_event,
            operation,
        )

    @staticmethod
    def _parse(response: httpx.Response, adapter: TypeAdapter[T], operation: str) -> T:
        """Validate a success response body against its contract."""
        try:
            data: Any = response.json()
        except ValueError as e:
            raise MalformedResponse(operation, response.text, f"invalid JSON: {e}") from e

        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            logger.warning(f"{operation} response did not match contract: {e.error_count()} error(s)")
            raise MalformedResponse(operation, response.text, str(e)) from e
