"""Presentation adapter: aggregated results and records to the ViewModel contract.

Deterministic and side-effect free: it never fetches or re-normalizes, it
only formats what it is given.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import MAX_PREC, ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from donor_dashboard.models.certificate import NormalizedRecord
from donor_dashboard.models.summary import AggregateSummary
from donor_dashboard.models.view_model import (
    Empty,
    Failed,
    Populated,
    RecordRow,
    SummaryView,
    Unauthenticated,
    ViewModel,
)
from donor_dashboard.models.wallet_identity import WalletIdentity
from donor_dashboard.services.aggregation import aggregate
from donor_dashboard.services.identity_gate import Skip, resolve
from donor_dashboard.utils.validation import truncate_identifier

if TYPE_CHECKING:
    from donor_dashboard.config import DashboardSettings


def quantize_amount(amount: Decimal, decimals: int) -> Decimal:
    """Round half-up to exactly ``decimals`` places."""
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return amount.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, decimals: int, unit_symbol: str | None = None) -> str:
    """Format ``amount`` with exactly ``decimals`` places, e.g. ``2.5000 SUI``."""
    text = f"{quantize_amount(amount, decimals):f}"
    return f"{text} {unit_symbol}" if unit_symbol else text


class PresentationAdapter:
    """Builds ViewModels from one cycle's outputs."""

    def __init__(self, settings: DashboardSettings) -> None:
        self._settings = settings

    def row(self, record: NormalizedRecord) -> RecordRow:
        s = self._settings
        return RecordRow(
            certificate_id=record.certificate_id,
            certificate_id_short=truncate_identifier(record.certificate_id, s.id_prefix_length),
            project_id=record.project_id,
            project_id_short=truncate_identifier(record.project_id, s.id_prefix_length),
            display_amount=record.display_amount,
            amount_display=format_amount(record.display_amount, s.amount_decimals, s.unit_symbol),
            project_path=s.project_path_template.format(project_id=record.project_id),
        )

    def summary(self, summary: AggregateSummary) -> SummaryView:
        s = self._settings
        return SummaryView(
            count=summary.count,
            total_display_amount=summary.total_display_amount,
            total_display=format_amount(
                summary.total_display_amount, s.total_decimals, s.unit_symbol
            ),
            skipped_count=summary.skipped_count,
        )

    def present(
        self,
        identity: WalletIdentity,
        summary: AggregateSummary | None,
        records: Sequence[NormalizedRecord],
        error: Exception | None,
    ) -> ViewModel:
        """Map inputs to exactly one view state.

        Priority: Unauthenticated > Failed > Empty > Populated. On failure the
        message is the configured user-facing text, never the exception text,
        and no total is computed. Records passed without a summary are
        aggregated here so the counts always match the rows.
        """
        decision = resolve(identity)
        if isinstance(decision, Skip):
            return Unauthenticated()
        if error is not None:
            return Failed(address=decision.address, message=self._settings.failure_message)
        if summary is None:
            summary = aggregate(records)
        if not records:
            return Empty(address=decision.address, skipped_count=summary.skipped_count)
        return Populated(
            address=decision.address,
            summary=self.summary(summary),
            rows=tuple(self.row(r) for r in records),
        )
