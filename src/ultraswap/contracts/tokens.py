"""Token metadata supplied by the caller for display."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenInfo(BaseModel):
    """Metadata for one token (symbol and decimal exponent)."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Mint address")
    symbol: str = Field(..., description="Token symbol (SOL, USDC, etc.)")
    decimals: int = Field(..., ge=0, description="Token decimals")
    name: Optional[str] = Field(None, description="Token name")
    logo_uri: Optional[str] = Field(None, description="Token logo URL")


# Native SOL, as wrapped SOL mint
SOL_TOKEN = TokenInfo(
    address="So11111111111111111111111111111111111111112",
    symbol="SOL",
    decimals=9,
    name="Wrapped SOL",
)

USDC_TOKEN = TokenInfo(
    address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    symbol="USDC",
    decimals=6,
    name="USD Coin",
)
