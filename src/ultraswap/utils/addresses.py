"""Solana address helpers."""

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def is_valid_solana_address(address: str) -> bool:
    """Validate Solana address format.

    Public keys are 32 bytes, which base58-encode to 32-44 characters.
    """
    if not address:
        return False

    if not 32 <= len(address) <= 44:
        return False

    return all(c in BASE58_ALPHABET for c in address)


def shorten_address(address: str, chars: int = 4) -> str:
    """Shorten an address for display (e.g. ``So11...1112``)."""
    if len(address) <= chars * 2:
        return address
    return f"{address[:chars]}...{address[-chars:]}"
