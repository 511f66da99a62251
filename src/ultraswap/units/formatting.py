"""Locale-aware number formatting for display values."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from ultraswap.config import Settings


@dataclass(frozen=True)
class NumberFormat:
    """Separators used when rendering numbers for a locale."""

    grouping_separator: str = ","
    decimal_separator: str = "."

    @classmethod
    def from_settings(cls, settings: Settings) -> "NumberFormat":
        return cls(
            grouping_separator=settings.number_grouping_separator,
            decimal_separator=settings.number_decimal_separator,
        )


DEFAULT_NUMBER_FORMAT = NumberFormat()


def _decimal_count(value: str) -> int:
    parts = value.split(".")
    return len(parts[1]) if len(parts) > 1 else 0


def format_number(
    value: Optional[Union[Decimal, int, str]],
    max_fraction_digits: Optional[int] = None,
    min_fraction_digits: int = 0,
    number_format: Optional[NumberFormat] = None,
) -> str:
    """Format a number with grouping and a bounded number of fraction digits.

    When ``max_fraction_digits`` is omitted the value keeps as many fraction
    digits as its own string form has. Trailing zeros beyond
    ``min_fraction_digits`` are dropped. Empty input renders as "".
    """
    if value is None or value == "":
        return ""

    fmt = number_format or DEFAULT_NUMBER_FORMAT
    text = str(value)
    try:
        number = Decimal(text)
    except InvalidOperation:
        return ""
    if not number.is_finite():
        return ""

    if max_fraction_digits is None:
        max_fraction_digits = _decimal_count(format(number, "f"))
    max_fraction_digits = max(max_fraction_digits, min_fraction_digits)

    with localcontext() as ctx:
        ctx.prec = max(28, abs(number.adjusted()) + max_fraction_digits + 2)
        rounded = number.quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP)
    rendered = format(rounded, f",.{max_fraction_digits}f")

    integer_part, _, fraction = rendered.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < min_fraction_digits:
        fraction = fraction.ljust(min_fraction_digits, "0")

    integer_part = integer_part.replace(",", fmt.grouping_separator)
    if fraction:
        return f"{integer_part}{fmt.decimal_separator}{fraction}"
    return integer_part


def has_numeric_value(value: Optional[Union[str, int, float, Decimal]]) -> bool:
    """Check that a value parses as a finite number."""
    if value is None or value == "":
        return False
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return False
    return number.is_finite()
