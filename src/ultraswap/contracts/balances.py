"""Balance contracts for GET /balances/{address}."""

from typing import Iterator, Optional

from pydantic import RootModel

from ultraswap.contracts.common import RawAmount, UltraModel


class TokenBalance(UltraModel):
    """Balance of a single token held by the account.

    ``ui_amount`` is passed through exactly as returned by the API.
    """

    amount: RawAmount
    ui_amount: float
    slot: int
    is_frozen: bool


class BalanceSet(RootModel[dict[str, TokenBalance]]):
    """Mapping of mint address to balance, one entry per held token."""

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, mint: object) -> bool:
        return mint in self.root

    def __getitem__(self, mint: str) -> TokenBalance:
        return self.root[mint]

    def get(self, mint: str) -> Optional[TokenBalance]:
        return self.root.get(mint)

    def items(self):
        return self.root.items()
