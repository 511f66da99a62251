"""Router directory client for GET /order/routers."""

import asyncio
import logging
from typing import Optional

from pydantic import TypeAdapter

from ultraswap.client.base import BaseUltraClient
from ultraswap.contracts.routers import AggregatorSource, Router, RouterDirectory

logger = logging.getLogger(__name__)

_directory_adapter = TypeAdapter(RouterDirectory)


class RouterDirectoryClient(BaseUltraClient):
    """Fetches the list of aggregation sources.

    The directory only changes when a new source is deployed, so the first
    successful response is kept for the lifetime of the client. Failures
    are never cached.
    """

    name = "routers"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._directory: Optional[RouterDirectory] = None

    async def get_routers(
        self,
        refresh: bool = False,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> RouterDirectory:
        """Get the router directory, from cache unless ``refresh`` is set."""
        if self._directory is not None and not refresh:
            return self._directory

        response = await self._request(
            "GET",
            self.endpoints.routers,
            "get_routers",
            cancel_event=cancel_event,
        )
        directory = self._parse(response, _directory_adapter, "get_routers")
        logger.debug(f"Loaded {len(directory)} routers")

        self._directory = directory
        return directory

    async def resolve(self, router_id: AggregatorSource) -> Optional[Router]:
        """Resolve a quote's router ID to its display metadata."""
        directory = await self.get_routers()
        return directory.find(router_id)

    @property
    def cached(self) -> Optional[RouterDirectory]:
        return self._directory

    def clear_cache(self) -> None:
        self._directory = None
