"""Keeps only the latest quote request in flight.

When swap parameters change quickly, each new request supersedes the
previous one: the previous request is cancelled, and the new one waits a
short debounce interval before it is sent.
"""

import asyncio
import logging
from typing import Mapping, Optional, Union

from ultraswap.client.quotes import QuoteClient
from ultraswap.contracts.orders import Quote, SwapQuoteParams
from ultraswap.utils.cancellation import new_cancel_event, run_cancellable

logger = logging.getLogger(__name__)


class LatestQuoteRequester:
    """Issues quote requests, cancelling whichever one is still pending.

    Example:
        requester = LatestQuoteRequester(service.quotes, debounce_seconds=0.25)
        quote = await requester.request(params)  # RequestCancelled if superseded
    """

    def __init__(self, quote_client: QuoteClient, debounce_seconds: float = 0.0):
        self.quote_client = quote_client
        self.debounce_seconds = debounce_seconds
        self._current: Optional[asyncio.Event] = None

    def cancel(self) -> None:
        """Cancel the pending request, if any."""
        if self._current is not None:
            self._current.set()
            self._current = None

    async def request(self, params: Union[SwapQuoteParams, Mapping]) -> Quote:
        """Request a quote, superseding any earlier pending request.

        Raises:
            RequestCancelled: If a newer request (or ``cancel``) supersedes this one
        """
        self.cancel()
        cancel_event = new_cancel_event()
        self._current = cancel_event

        try:
            if self.debounce_seconds > 0:
                await run_cancellable(
                    asyncio.sleep(self.debounce_seconds), cancel_event, "get_quote (debounce)"
                )
            return await self.quote_client.get_quote(params, cancel_event=cancel_event)
        finally:
            if self._current is cancel_event:
                self._current = None
