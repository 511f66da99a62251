"""Shield client for GET /shield."""

import asyncio
import logging
from typing import Optional, Sequence

from pydantic import TypeAdapter

from ultraswap.client.base import BaseUltraClient, InvalidArgument
from ultraswap.contracts.shield import ShieldResult

logger = logging.getLogger(__name__)

_shield_adapter = TypeAdapter(ShieldResult)


class ShieldClient(BaseUltraClient):
    """Fetches risk warnings for token mints."""

    name = "shield"

    async def get_shield(
        self,
        mints: Sequence[str],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ShieldResult:
        """Get warnings for each mint, sent as one comma-joined list."""
        if isinstance(mints, str):
            mints = [mints]
        if not mints or any(not mint for mint in mints):
            raise InvalidArgument("mints must be a non-empty list of mint addresses")

        response = await self._request(
            "GET",
            self.endpoints.shield,
            "get_shield",
            params={"mints": ",".join(mints)},
            cancel_event=cancel_event,
        )
        result = self._parse(response, _shield_adapter, "get_shield")

        flagged = [mint for mint in mints if result.warnings_for(mint)]
        if flagged:
            logger.info(f"Shield warnings for {len(flagged)} of {len(mints)} mints")
        return result
