"""Quote summary for display.

Turns a quote into the values a price-info panel shows: rate, price
impact, router, fee and transaction fee. Does not fetch anything itself;
the router directory is passed in by the caller.
"""

import logging
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ultraswap.contracts.orders import Quote
from ultraswap.contracts.routers import RouterDirectory
from ultraswap.contracts.tokens import TokenInfo
from ultraswap.errors import FeeOutOfRangeError
from ultraswap.units.conversion import from_raw_units
from ultraswap.units.formatting import NumberFormat, format_number
from ultraswap.units.metrics import (
    ExchangeRate,
    clamp_fee_bps,
    fee_percent,
    format_price_impact,
    prioritization_fee,
)

logger = logging.getLogger(__name__)

NATIVE_SYMBOL = "SOL"


class QuoteSummary(BaseModel):
    """Display values for one quote."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(..., description="Quote request ID")
    from_symbol: str
    to_symbol: str
    from_amount: Decimal = Field(..., description="Input amount in token units")
    to_amount: Decimal = Field(..., description="Output amount in token units")
    minimum_received: Decimal = Field(..., description="Minimum output in token units")

    rate_text: str = Field(..., description="e.g. '1 SOL ≈ 150.25 USDC', or '-'")
    inverse_rate_text: str = Field(..., description="Rate in the other direction")
    price_impact_text: Optional[str] = Field(
        None, description="e.g. '-1.50%'; None when negligible"
    )

    router_id: str
    router_name: Optional[str] = None
    router_icon: Optional[str] = None

    fee_percent: Decimal = Field(..., description="Platform fee in percent")
    fee_flagged: bool = Field(default=False, description="Quote fee was out of range")
    prioritization_fee: Optional[Decimal] = Field(
        None, description="Prioritization fee in SOL; None when not applicable"
    )
    transaction_fee_text: str
    gasless: bool = False
    route_labels: list[str] = Field(default_factory=list)

    def lines(self) -> list[tuple[str, str]]:
        """Label/value rows in panel order; negligible impact is omitted."""
        rows = [("Rate", self.rate_text)]
        if self.price_impact_text:
            rows.append(("Price Impact", self.price_impact_text))
        if self.router_name:
            rows.append(("Router", self.router_name))
        rows.append(("Fee", f"{format_number(self.fee_percent)}%"))
        rows.append(("Transaction Fee", self.transaction_fee_text))
        return rows


def summarize_quote(
    quote: Quote,
    from_token: TokenInfo,
    to_token: TokenInfo,
    routers: Optional[RouterDirectory] = None,
    number_format: Optional[NumberFormat] = None,
) -> QuoteSummary:
    """Build display values for a quote.

    Args:
        quote: Quote from the order endpoint
        from_token: Metadata of the input token
        to_token: Metadata of the output token
        routers: Router directory for name/icon lookup (optional)
        number_format: Locale separators

    Returns:
        QuoteSummary
    """
    rate = ExchangeRate.from_quote(quote, from_token.decimals, to_token.decimals)

    try:
        fee = fee_percent(quote.fee_bps)
        fee_flagged = False
    except FeeOutOfRangeError:
        logger.warning(f"Quote {quote.request_id} has out-of-range fee_bps={quote.fee_bps}; clamping")
        fee = fee_percent(clamp_fee_bps(quote.fee_bps))
        fee_flagged = True

    router = routers.find(quote.router) if routers is not None else None

    priority_fee = prioritization_fee(quote.prioritization_fee_lamports)
    fee_amount_text = format_number(priority_fee, number_format=number_format) or "0"
    transaction_fee_text = f"{fee_amount_text} {NATIVE_SYMBOL}"

    return QuoteSummary(
        request_id=quote.request_id,
        from_symbol=from_token.symbol,
        to_symbol=to_token.symbol,
        from_amount=from_raw_units(quote.in_amount, from_token.decimals),
        to_amount=from_raw_units(quote.out_amount, to_token.decimals),
        minimum_received=from_raw_units(quote.other_amount_threshold, to_token.decimals),
        rate_text=rate.format(from_token.symbol, to_token.symbol, number_format),
        inverse_rate_text=rate.reversed().format(to_token.symbol, from_token.symbol, number_format),
        price_impact_text=format_price_impact(quote.price_impact_pct, number_format),
        router_id=quote.router.value,
        router_name=router.name if router else None,
        router_icon=router.icon if router else None,
        fee_percent=fee,
        fee_flagged=fee_flagged,
        prioritization_fee=priority_fee,
        transaction_fee_text=transaction_fee_text,
        gasless=quote.gasless,
        route_labels=quote.route_labels,
    )
