"""Factory for the Ultra service facade.

Builds every resource client over one immutable route table so the whole
process shares a single configuration value.
"""

import logging
from typing import Optional

import httpx

from ultraswap.client.balances import BalanceClient
from ultraswap.client.execution import ExecutionClient
from ultraswap.client.quotes import QuoteClient
from ultraswap.client.routers import RouterDirectoryClient
from ultraswap.client.shield import ShieldClient
from ultraswap.config import Settings, UltraEndpoints, get_settings

logger = logging.getLogger(__name__)


class UltraSwapService:
    """All Ultra API operations behind one object.

    Example:
        service = create_ultra_service()
        quote = await service.get_quote(params)
        outcome = await service.submit(signed_tx, quote.request_id)
    """

    def __init__(
        self,
        endpoints: UltraEndpoints,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoints = endpoints
        options = dict(endpoints=endpoints, api_key=api_key, timeout=timeout, transport=transport)

        self.quotes = QuoteClient(**options)
        self.execution = ExecutionClient(**options)
        self.routers = RouterDirectoryClient(**options)
        self.balances = BalanceClient(**options)
        self.shield = ShieldClient(**options)

        # Shortcuts matching the API operations
        self.get_quote = self.quotes.get_quote
        self.submit = self.execution.submit
        self.get_routers = self.routers.get_routers
        self.get_balance = self.balances.get_balance
        self.get_shield = self.shield.get_shield

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.endpoints.base_url!r})"


def create_ultra_service(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UltraSwapService:
    """Create an Ultra service from settings.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        transport: Custom httpx transport (used by tests)
    """
    settings = settings or get_settings()
    service = UltraSwapService(
        endpoints=settings.endpoints(),
        api_key=settings.api_key,
        timeout=settings.http_timeout,
        transport=transport,
    )
    logger.debug(f"Created {service!r}")
    return service


_ultra_service: Optional[UltraSwapService] = None


def get_ultra_service() -> UltraSwapService:
    """Get the process-wide Ultra service."""
    global _ultra_service
    if _ultra_service is None:
        _ultra_service = create_ultra_service()
    return _ultra_service
