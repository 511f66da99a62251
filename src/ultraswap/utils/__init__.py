"""Utility modules for the Ultra client."""

from ultraswap.utils.addresses import is_valid_solana_address, shorten_address
from ultraswap.utils.cancellation import new_cancel_event, run_cancellable

__all__ = [
    "is_valid_solana_address",
    "shorten_address",
    "new_cancel_event",
    "run_cancellable",
]
