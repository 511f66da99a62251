"""Router directory contracts."""

from enum import Enum
from typing import Iterator, Optional

from pydantic import RootModel

from ultraswap.contracts.common import UltraModel


class AggregatorSource(str, Enum):
    """Aggregation sources that can produce an Ultra quote."""

    METIS = "metis"
    JUPITERZ = "jupiterz"
    HASHFLOW = "hashflow"
    DFLOW = "dflow"


class Router(UltraModel):
    id: AggregatorSource
    name: str
    icon: str = ""


class RouterDirectory(RootModel[list[Router]]):
    """Routers returned by GET /order/routers, in API order."""

    def __iter__(self) -> Iterator[Router]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def find(self, router_id: AggregatorSource) -> Optional[Router]:
        """Look up a router by its aggregation source."""
        for router in self.root:
            if router.id == router_id:
                return router
        return None
