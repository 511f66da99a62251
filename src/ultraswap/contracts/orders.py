"""Quote (order) request and response contracts.

API docs: https://dev.jup.ag/docs/api/ultra-api/order
"""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from ultraswap.contracts.common import RawAmount, UltraModel
from ultraswap.contracts.routers import AggregatorSource


class SwapMode(str, Enum):
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class SwapQuoteParams(UltraModel):
    """Parameters for a quote request.

    ``amount`` is already in the input token's raw units; no decimal
    scaling is applied to it. Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    input_mint: str = Field(..., min_length=1, description="Input token mint")
    output_mint: str = Field(..., min_length=1, description="Output token mint")
    amount: RawAmount = Field(..., description="Raw input amount")
    taker: Optional[str] = Field(None, description="Taker wallet address")
    swap_mode: Optional[SwapMode] = Field(None, description="ExactIn or ExactOut")
    referral_account: Optional[str] = Field(None, description="Referral account")
    referral_fee: Optional[int] = Field(
        None, ge=0, le=10000, description="Referral fee in basis points"
    )

    def to_query_params(self) -> dict[str, str]:
        """Serialize defined fields only; absent fields are omitted."""
        return {key: str(value) for key, value in self.to_wire().items()}


class SwapInfo(UltraModel):
    """A single leg of the route plan."""

    input_mint: str
    in_amount: RawAmount
    output_mint: str
    out_amount: RawAmount
    amm_key: str
    label: str = ""
    fee_amount: RawAmount = "0"
    fee_mint: str = ""


class RoutePlanStep(UltraModel):
    swap_info: SwapInfo
    percent: int


class Quote(UltraModel):
    """Quote returned by GET /order.

    ``transaction`` is None when the route needs more than one step or no
    taker was given; ``request_id`` must be echoed on execution.
    """

    input_mint: str
    in_amount: RawAmount
    output_mint: str
    out_amount: RawAmount
    other_amount_threshold: RawAmount
    price_impact_pct: str = "0"
    route_plan: list[RoutePlanStep] = Field(default_factory=list)
    context_slot: int = 0
    transaction: Optional[str] = None
    swap_type: str = "ultra"
    gasless: bool = False
    request_id: str
    prioritization_fee_lamports: Optional[int] = Field(None, ge=0)
    fee_bps: int = 0
    router: AggregatorSource

    @model_validator(mode="after")
    def _route_plan_present(self) -> "Quote":
        if int(self.out_amount) > 0 and not self.route_plan:
            raise ValueError("route_plan is empty for a quote with non-zero output")
        return self

    @property
    def in_amount_raw(self) -> int:
        return int(self.in_amount)

    @property
    def out_amount_raw(self) -> int:
        return int(self.out_amount)

    @property
    def is_executable(self) -> bool:
        """Whether the quote carries a transaction ready for signing."""
        return bool(self.transaction)

    @property
    def route_labels(self) -> list[str]:
        return [step.swap_info.label for step in self.route_plan]
