"""Request and response contracts for the Ultra API.

These Pydantic models mirror the API's JSON (camelCase on the wire,
snake_case in Python). Raw token amounts stay integer digit strings.
"""

from ultraswap.contracts.balances import BalanceSet, TokenBalance
from ultraswap.contracts.execution import (
    ExecuteRequest,
    ExecutionFailed,
    ExecutionOutcome,
    ExecutionSuccess,
    execution_outcome_adapter,
)
from ultraswap.contracts.orders import (
    Quote,
    RoutePlanStep,
    SwapInfo,
    SwapMode,
    SwapQuoteParams,
)
from ultraswap.contracts.routers import AggregatorSource, Router, RouterDirectory
from ultraswap.contracts.shield import Severity, ShieldResult, ShieldWarning
from ultraswap.contracts.tokens import TokenInfo

__all__ = [
    # Quote contracts
    "SwapMode",
    "SwapQuoteParams",
    "SwapInfo",
    "RoutePlanStep",
    "Quote",
    # Execution contracts
    "ExecuteRequest",
    "ExecutionSuccess",
    "ExecutionFailed",
    "ExecutionOutcome",
    "execution_outcome_adapter",
    # Router contracts
    "AggregatorSource",
    "Router",
    "RouterDirectory",
    # Balance and shield contracts
    "TokenBalance",
    "BalanceSet",
    "Severity",
    "ShieldWarning",
    "ShieldResult",
    # Display metadata
    "TokenInfo",
]
