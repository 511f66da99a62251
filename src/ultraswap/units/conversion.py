"""Conversion between raw token units and human-readable decimals.

Both directions round down so a converted amount never represents more
than the source amount.
"""

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from ultraswap.errors import InvalidArgument

# Base-unit exponent of the native asset (lamports per SOL)
NATIVE_DECIMALS = 9

AmountLike = Union[Decimal, int, float, str]


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidArgument(f"decimals must be an integer, got {decimals!r}")
    if decimals < 0:
        raise InvalidArgument(f"decimals must be non-negative, got {decimals}")


def _working_precision(value: Decimal, decimals: int) -> int:
    """Context precision wide enough to scale by 10 ** decimals without rounding."""
    return max(28, len(value.as_tuple().digits) + abs(value.adjusted()) + decimals + 2)


def _to_decimal(amount: AmountLike) -> Decimal:
    """Parse an amount into a finite, non-negative Decimal."""
    if isinstance(amount, bool):
        raise InvalidArgument("amount must be numeric, got a boolean")

    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, float):
            # repr gives the shortest string that round-trips
            value = Decimal(repr(amount))
        elif isinstance(amount, int):
            value = Decimal(amount)
        elif isinstance(amount, str):
            if "_" in amount:
                raise InvalidArgument(f"amount is not a plain decimal number: {amount!r}")
            value = Decimal(amount.strip())
        else:
            raise InvalidArgument(f"unsupported amount type: {type(amount).__name__}")
    except InvalidOperation as e:
        raise InvalidArgument(f"amount is not a number: {amount!r}") from e

    if not value.is_finite():
        raise InvalidArgument(f"amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidArgument(f"amount must be non-negative, got {amount!r}")
    return value


def to_raw_units(amount: AmountLike, decimals: int) -> int:
    """Convert a human-readable amount to raw token units.

    Multiplies by ``10 ** decimals`` and truncates any remaining fraction.

    Args:
        amount: Human-readable amount (e.g. ``Decimal("1.5")`` SOL)
        decimals: Token decimal exponent

    Returns:
        Amount in smallest units (e.g. lamports)

    Raises:
        InvalidArgument: On negative decimals or a negative/non-finite amount
    """
    _check_decimals(decimals)
    value = _to_decimal(amount)

    with localcontext() as ctx:
        ctx.prec = _working_precision(value, decimals)
        scaled = value.scaleb(decimals)
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def from_raw_units(amount: Union[int, str], decimals: int) -> Decimal:
    """Convert raw token units to a human-readable Decimal.

    Args:
        amount: Raw amount as an int or an integer digit string
        decimals: Token decimal exponent

    Returns:
        Decimal rounded down to ``decimals`` fractional digits

    Raises:
        InvalidArgument: On negative decimals or a non-integer/negative amount
    """
    _check_decimals(decimals)
    if isinstance(amount, str) and not (amount.isdigit() and amount.isascii()):
        raise InvalidArgument(f"raw amount must be a digit string, got {amount!r}")
    value = _to_decimal(amount)
    if value != value.to_integral_value():
        raise InvalidArgument(f"raw amount must be an integer, got {amount!r}")

    with localcontext() as ctx:
        ctx.prec = _working_precision(value, decimals)
        quantum = Decimal(1).scaleb(-decimals)
        return value.scaleb(-decimals).quantize(quantum, rounding=ROUND_DOWN)
