"""AggregateSummary: derived statistics over one cycle's normalized records."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class AggregateSummary:
    """Count and total of a record set. Recomputed on every fetch, never persisted."""

    count: int
    total_display_amount: Decimal
    skipped_count: int = 0
    """Records dropped by the ``skip`` malformed-amount policy (0 under ``fail``)."""

    @classmethod
    def empty(cls) -> AggregateSummary:
        return cls(count=0, total_display_amount=Decimal(0))
