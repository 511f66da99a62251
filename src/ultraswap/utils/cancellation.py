"""Cooperative cancellation for in-flight requests.

A caller passes an ``asyncio.Event`` as a cancel signal. Setting it aborts
the request at the transport boundary: the request task is cancelled and
the call raises ``RequestCancelled`` without waiting for a response.
"""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from ultraswap.errors import RequestCancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_cancel_event() -> asyncio.Event:
    """Create a cancel signal for one request."""
    return asyncio.Event()


async def _discard(task: asyncio.Task) -> None:
    """Cancel a task, wait for it to settle and drop its result."""
    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled():
        # Retrieve so a late exception is not reported as unhandled
        task.exception()


async def run_cancellable(
    awaitable: Awaitable[T],
    cancel_event: Optional[asyncio.Event],
    operation: str,
) -> T:
    """Await a request unless the cancel signal fires first.

    Args:
        awaitable: The request coroutine
        cancel_event: Cancel signal (None = not cancellable)
        operation: Description of the operation for logging

    Returns:
        The request's result

    Raises:
        RequestCancelled: If the signal is set before the request completes
    """
    if cancel_event is None:
        return await awaitable

    request = asyncio.ensure_future(awaitable)
    if cancel_event.is_set():
        await _discard(request)
        logger.debug(f"{operation} cancelled before start")
        raise RequestCancelled(operation)

    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({request, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        request.cancel()
        waiter.cancel()
        raise

    # A signal set by the time we resume wins, even if a response arrived
    waiter.cancel()
    if cancel_event.is_set():
        await _discard(request)
        logger.debug(f"{operation} cancelled by caller")
        raise RequestCancelled(operation)

    return request.result()
