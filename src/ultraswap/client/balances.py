"""Balance client for GET /balances/{address}."""

import asyncio
import logging
from typing import Optional

from pydantic import TypeAdapter

from ultraswap.client.base import BaseUltraClient, InvalidArgument
from ultraswap.contracts.balances import BalanceSet

logger = logging.getLogger(__name__)

_balances_adapter = TypeAdapter(BalanceSet)

# Characters that would change the request target if placed in the path
_UNSAFE_PATH_CHARS = frozenset("/?#%\\")


def _is_path_segment(address: str) -> bool:
    """Check that an address is usable as one literal URL path segment."""
    if not address or address in (".", ".."):
        return False
    return not any(c.isspace() or c in _UNSAFE_PATH_CHARS for c in address)


class BalanceClient(BaseUltraClient):
    """Fetches per-token balances for an account."""

    name = "balances"

    async def get_balance(
        self,
        address: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> BalanceSet:
        """Get all token balances held by ``address``.

        A failed fetch raises; it is never reported as an empty balance.
        """
        if not _is_path_segment(address):
            raise InvalidArgument(f"invalid account address: {address!r}")

        response = await self._request(
            "GET",
            self.endpoints.balances_for(address),
            "get_balance",
            cancel_event=cancel_event,
        )
        balances = self._parse(response, _balances_adapter, "get_balance")
        logger.debug(f"Fetched {len(balances)} balances for {address}")
        return balances
