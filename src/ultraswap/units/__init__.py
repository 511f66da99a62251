"""Token unit conversion, formatting and derived quote metrics."""

from ultraswap.units.conversion import NATIVE_DECIMALS, from_raw_units, to_raw_units
from ultraswap.units.formatting import NumberFormat, format_number, has_numeric_value
from ultraswap.units.metrics import (
    ExchangeRate,
    clamp_fee_bps,
    fee_percent,
    format_price_impact,
    price_impact_percent,
    prioritization_fee,
)

__all__ = [
    "NATIVE_DECIMALS",
    "to_raw_units",
    "from_raw_units",
    "NumberFormat",
    "format_number",
    "has_numeric_value",
    "ExchangeRate",
    "price_impact_percent",
    "format_price_impact",
    "fee_percent",
    "clamp_fee_bps",
    "prioritization_fee",
]
