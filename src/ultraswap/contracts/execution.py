"""Execution request and outcome contracts.

The outcome of POST /execute is a tagged union on ``status``: a successful
call may still report a failed swap.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BeforeValidator, ConfigDict, Field, TypeAdapter

from ultraswap.contracts.common import RawAmount, UltraModel


def _slot_to_string(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


Slot = Annotated[str, BeforeValidator(_slot_to_string)]


class ExecuteRequest(UltraModel):
    """Body of POST /execute."""

    model_config = ConfigDict(extra="forbid")

    signed_transaction: str = Field(..., min_length=1, description="Base64 signed transaction")
    request_id: str = Field(..., min_length=1, description="Request ID from the quote")


class ExecutionSuccess(UltraModel):
    """Swap landed on chain."""

    status: Literal["Success"] = "Success"
    signature: str
    slot: Slot
    code: int = 0
    input_amount_result: RawAmount
    output_amount_result: RawAmount

    @property
    def is_success(self) -> bool:
        return True


class ExecutionFailed(UltraModel):
    """Swap was rejected or failed; the call itself succeeded.

    ``signature`` and ``slot`` are absent when the transaction never
    reached the chain (e.g. simulation failure).
    """

    status: Literal["Failed"] = "Failed"
    signature: Optional[str] = None
    slot: Optional[Slot] = None
    code: int
    message: str = ""
    error: str = ""

    @property
    def is_success(self) -> bool:
        return False


ExecutionOutcome = Annotated[
    Union[ExecutionSuccess, ExecutionFailed],
    Field(discriminator="status"),
]

execution_outcome_adapter: TypeAdapter[ExecutionOutcome] = TypeAdapter(ExecutionOutcome)
