"""Error taxonomy for Ultra client operations.

Every client call raises exactly one of these. A failed swap reported by
the execution endpoint is not an error: it is returned as
``ExecutionFailed``.
"""

from typing import Optional


class UltraClientError(Exception):
    """Base class for all Ultra client errors."""

    pass


class InvalidArgument(UltraClientError, ValueError):
    """Raised when a caller passes a malformed argument."""

    pass


class FeeOutOfRangeError(InvalidArgument):
    """Raised when a quote carries a fee outside 0-10000 bps."""

    def __init__(self, fee_bps: int):
        self.fee_bps = fee_bps
        super().__init__(f"fee_bps {fee_bps} outside 0..10000")


class RequestCancelled(UltraClientError):
    """Raised when the caller cancels a request before it completes."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} cancelled")


class UpstreamError(UltraClientError):
    """Raised on a non-success transport status.

    ``status_code`` is None when no response was received at all
    (connection failure or a configured timeout).
    """

    def __init__(
        self,
        operation: str,
        status_code: Optional[int],
        body: str = "",
        reason: Optional[str] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.body = body
        self.reason = reason
        detail = reason or body[:200]
        super().__init__(f"{operation} failed: HTTP {status_code} - {detail}")


class MalformedResponse(UltraClientError):
    """Raised when a success response does not match the expected shape."""

    def __init__(self, operation: str, body: str, reason: str):
        self.operation = operation
        self.body = body
        self.reason = reason
        super().__init__(f"{operation} returned a malformed response: {reason}")
