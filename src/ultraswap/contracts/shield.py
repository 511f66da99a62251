"""Token risk warning contracts for GET /shield."""

from enum import Enum
from typing import Optional

from pydantic import Field

from ultraswap.contracts.common import UltraModel


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


_SEVERITY_RANK = {Severity.INFO: 0, Severity.WARNING: 1, Severity.CRITICAL: 2}


class ShieldWarning(UltraModel):
    """A single risk annotation on a token mint."""

    type: str
    message: str
    severity: Severity


class ShieldResult(UltraModel):
    """Warnings per mint. A mint with no entry has no known risk."""

    warnings: dict[str, list[ShieldWarning]] = Field(default_factory=dict)

    def warnings_for(self, mint: str) -> list[ShieldWarning]:
        return list(self.warnings.get(mint, []))

    def highest_severity(self, mint: str) -> Optional[Severity]:
        """Most severe warning for a mint, or None when it has none."""
        found = self.warnings.get(mint) or []
        if not found:
            return None
        return max((w.severity for w in found), key=_SEVERITY_RANK.__getitem__)

    def has_critical(self, mint: str) -> bool:
        return self.highest_severity(mint) == Severity.CRITICAL
