"""Execution client for POST /execute."""

import asyncio
import logging
from typing import Optional

from pydantic import ValidationError

from ultraswap.client.base import BaseUltraClient, InvalidArgument
from ultraswap.contracts.execution import (
    ExecuteRequest,
    ExecutionOutcome,
    ExecutionSuccess,
    execution_outcome_adapter,
)

logger = logging.getLogger(__name__)


class ExecutionClient(BaseUltraClient):
    """Submits signed transactions and returns their terminal outcome.

    No polling and no retries: the returned outcome is final. The request ID
    is forwarded as given; it is not checked against any earlier quote.
    """

    name = "execution"

    async def submit(
        self,
        signed_transaction: str,
        request_id: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ExecutionOutcome:
        """Submit a signed swap transaction.

        Args:
            signed_transaction: Base64 signed transaction from the quote
            request_id: ``Quote.request_id`` of the quote that was signed
            cancel_event: Set to stop waiting for the response. The
                transaction may still land once it has been sent.

        Returns:
            ExecutionSuccess or ExecutionFailed

        Raises:
            InvalidArgument: If either argument is empty
            UpstreamError: On a non-success status
            MalformedResponse: If the body is neither outcome variant
        """
        try:
            body = ExecuteRequest(
                signed_transaction=signed_transaction,
                request_id=request_id,
            )
        except ValidationError as e:
            raise InvalidArgument(f"invalid execute request: {e}") from e

        response = await self._request(
            "POST",
            self.endpoints.execute,
            "submit",
            json=body.to_wire(),
            cancel_event=cancel_event,
        )
        outcome = self._parse(response, execution_outcome_adapter, "submit")

        if isinstance(outcome, ExecutionSuccess):
            logger.info(f"Swap {request_id} succeeded: {outcome.signature} (slot {outcome.slot})")
        else:
            logger.warning(
                f"Swap {request_id} failed: code={outcome.code} {outcome.message} {outcome.error}"
            )
        return outcome
