"""Quote client for GET /order."""

import asyncio
import logging
from typing import Mapping, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ultraswap.client.base import BaseUltraClient, InvalidArgument
from ultraswap.contracts.orders import Quote, SwapQuoteParams

logger = logging.getLogger(__name__)

_quote_adapter = TypeAdapter(Quote)


class QuoteClient(BaseUltraClient):
    """Requests swap quotes from the Ultra order endpoint.

    Single-attempt: no retries and no deduplication of overlapping calls.
    """

    name = "quotes"

    async def get_quote(
        self,
        params: Union[SwapQuoteParams, Mapping],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Quote:
        """Get a swap quote.

        Args:
            params: Quote parameters (model or plain mapping)
            cancel_event: Set to abort the request before a response arrives

        Returns:
            Quote with route plan, request ID and (optionally) a transaction

        Raises:
            InvalidArgument: If params are malformed
            RequestCancelled: If cancel_event is set first
            UpstreamError: On a non-success status
            MalformedResponse: If the body is not a valid quote
        """
        if not isinstance(params, SwapQuoteParams):
            try:
                params = SwapQuoteParams.model_validate(params)
            except ValidationError as e:
                raise InvalidArgument(f"invalid quote params: {e}") from e

        query = params.to_query_params()
        response = await self._request(
            "GET",
            self.endpoints.order,
            "get_quote",
            params=query,
            cancel_event=cancel_event,
        )
        quote = self._parse(response, _quote_adapter, "get_quote")

        logger.info(
            f"Quote {quote.request_id}: {quote.in_amount} {quote.input_mint} -> "
            f"{quote.out_amount} {quote.output_mint} via {quote.router.value}"
        )
        return quote
