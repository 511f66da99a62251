"""Clients for the Ultra swap API.

Clients:
- QuoteClient: GET /order
- ExecutionClient: POST /execute
- RouterDirectoryClient: GET /order/routers (cached)
- BalanceClient: GET /balances/{address}
- ShieldClient: GET /shield
"""

from ultraswap.client.balances import BalanceClient
from ultraswap.client.base import (
    BaseUltraClient,
    InvalidArgument,
    MalformedResponse,
    RequestCancelled,
    UltraClientError,
    UpstreamError,
)
from ultraswap.client.execution import ExecutionClient
from ultraswap.client.factory import UltraSwapService, create_ultra_service, get_ultra_service
from ultraswap.client.quotes import QuoteClient
from ultraswap.client.routers import RouterDirectoryClient
from ultraswap.client.shield import ShieldClient

__all__ = [
    # Base classes
    "BaseUltraClient",
    # Errors
    "UltraClientError",
    "InvalidArgument",
    "RequestCancelled",
    "UpstreamError",
    "MalformedResponse",
    # Clients
    "QuoteClient",
    "ExecutionClient",
    "RouterDirectoryClient",
    "BalanceClient",
    "ShieldClient",
    # Facade
    "UltraSwapService",
    "create_ultra_service",
    "get_ultra_service",
]
