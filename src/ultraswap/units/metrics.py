"""Display metrics derived from a quote.

Pure functions over quote fields: price impact, exchange rate, fee
percentage and prioritization fee.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ultraswap.contracts.orders import Quote
from ultraswap.errors import FeeOutOfRangeError, InvalidArgument
from ultraswap.units.conversion import NATIVE_DECIMALS, from_raw_units
from ultraswap.units.formatting import NumberFormat, format_number

# Below this (in percent) price impact is not shown
NEGLIGIBLE_PRICE_IMPACT = Decimal("0.01")

MAX_FEE_BPS = 10000


def _impact_percent_exact(price_impact_pct: Union[str, Decimal, None]) -> Decimal:
    try:
        fraction = Decimal(str(price_impact_pct or 0))
    except InvalidOperation as e:
        raise InvalidArgument(f"price impact is not a number: {price_impact_pct!r}") from e
    if not fraction.is_finite():
        raise InvalidArgument(f"price impact must be finite, got {price_impact_pct!r}")
    return fraction * 100


def price_impact_percent(price_impact_pct: Union[str, Decimal, None]) -> Decimal:
    """Convert the quote's price impact fraction to percent, rounded to 2 dp."""
    return _impact_percent_exact(price_impact_pct).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_price_impact(
    price_impact_pct: Union[str, Decimal, None],
    number_format: Optional[NumberFormat] = None,
) -> Optional[str]:
    """Render price impact as ``-1.50%``.

    Returns None when the impact is negligible (below 0.01%), so it is
    shown as no impact rather than ``0.00%``. A negative impact is a price
    improvement and renders with a ``+`` sign.
    """
    if abs(_impact_percent_exact(price_impact_pct)) < NEGLIGIBLE_PRICE_IMPACT:
        return None

    percent = price_impact_percent(price_impact_pct)
    text = format_number(abs(percent), 2, 2, number_format)
    sign = "+" if percent < 0 else "-"
    return f"{sign}{text}%"


def fee_percent(fee_bps: int) -> Decimal:
    """Convert a fee in basis points to percent.

    Raises:
        FeeOutOfRangeError: If fee_bps is outside 0..10000
    """
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, int):
        raise InvalidArgument(f"fee_bps must be an integer, got {fee_bps!r}")
    if not 0 <= fee_bps <= MAX_FEE_BPS:
        raise FeeOutOfRangeError(fee_bps)
    return Decimal(fee_bps) / 100


def clamp_fee_bps(fee_bps: int) -> int:
    return min(max(fee_bps, 0), MAX_FEE_BPS)


def prioritization_fee(lamports: Optional[int]) -> Optional[Decimal]:
    """Prioritization fee in native units, or None when the quote has none."""
    if lamports is None:
        return None
    return from_raw_units(lamports, NATIVE_DECIMALS)


@dataclass(frozen=True)
class ExchangeRate:
    """Effective rate between the quote's input and output amounts.

    Reversing only swaps the direction of display; the underlying amounts
    are unchanged.
    """

    in_amount: int
    in_decimals: int
    out_amount: int
    out_decimals: int

    @classmethod
    def from_quote(cls, quote: Quote, in_decimals: int, out_decimals: int) -> "ExchangeRate":
        return cls(
            in_amount=quote.in_amount_raw,
            in_decimals=in_decimals,
            out_amount=quote.out_amount_raw,
            out_decimals=out_decimals,
        )

    @property
    def input_value(self) -> Decimal:
        return from_raw_units(self.in_amount, self.in_decimals)

    @property
    def output_value(self) -> Decimal:
        return from_raw_units(self.out_amount, self.out_decimals)

    @property
    def is_available(self) -> bool:
        return self.in_amount > 0 and self.out_amount > 0

    @property
    def rate(self) -> Optional[Decimal]:
        """Output units per one input unit."""
        if not self.is_available:
            return None
        return self.output_value / self.input_value

    @property
    def inverse_rate(self) -> Optional[Decimal]:
        """Input units per one output unit."""
        if not self.is_available:
            return None
        return self.input_value / self.output_value

    def reversed(self) -> "ExchangeRate":
        return ExchangeRate(
            in_amount=self.out_amount,
            in_decimals=self.out_decimals,
            out_amount=self.in_amount,
            out_decimals=self.in_decimals,
        )

    def format(
        self,
        in_symbol: str,
        out_symbol: str,
        number_format: Optional[NumberFormat] = None,
    ) -> str:
        """Render as ``1 SOL ≈ 150.25 USDC``, or ``-`` when unavailable."""
        rate = self.rate
        if rate is None:
            return "-"
        return f"1 {in_symbol} ≈ {format_number(rate, self.out_decimals, 0, number_format)} {out_symbol}"
