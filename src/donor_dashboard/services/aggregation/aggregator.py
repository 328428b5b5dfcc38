"""Aggregator: summary statistics over normalized records."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import MAX_PREC, Decimal, localcontext

from donor_dashboard.models.certificate import NormalizedRecord
from donor_dashboard.models.summary import AggregateSummary


def aggregate(records: Sequence[NormalizedRecord], *, skipped: int = 0) -> AggregateSummary:
    """Count and sum ``records``.

    Every record contributes exactly once: no deduplication by certificate id
    (the ledger guarantees uniqueness), no filtering, no weighting. The sum
    runs at maximum precision so it is exact and does not depend on input order.
    """
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        total = sum((r.display_amount for r in records), Decimal(0))
    return AggregateSummary(
        count=len(records),
        total_display_amount=total,
        skipped_count=skipped,
    )
