# -*- coding: utf-8 -*-
"""Dashboard cycle runner: identity change -> fetch -> normalize -> aggregate -> present.

Concurrency model: everything runs on one event loop and the ledger fetch is
the only suspension point. Each started cycle takes a new generation number;
a cycle commits its view only if its generation is still the latest when the
fetch returns. The last resolved identity therefore wins, not the last
completed fetch. There is one mutable current-view slot and no locking.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.contextvars import bound_contextvars

from donor_dashboard.events.dashboard_events import DashboardViewCommittedEvent
from donor_dashboard.exceptions import FetchError, MalformedAmountError
from donor_dashboard.models.view_model import (
    Failed,
    Loading,
    Populated,
    Unauthenticated,
    ViewModel,
)
from donor_dashboard.models.wallet_identity import WalletIdentity
from donor_dashboard.services.aggregation import aggregate
from donor_dashboard.services.identity_gate import (
    CycleAction,
    Skip,
    cycle_trigger,
    resolve,
)
from donor_dashboard.services.normalizer import normalize_all
from donor_dashboard.utils.validation import mask_address

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from donor_dashboard.config import Settings
    from donor_dashboard.services.presentation import PresentationAdapter
    from donor_dashboard.services.receipt_fetcher import ReceiptFetcher


def _committed_event(view: ViewModel, generation: int) -> DashboardViewCommittedEvent:
    """Snapshot ``view`` into an event; handlers may run after later commits."""
    fields: dict[str, Any] = {
        "state": view.state.value,
        "generation": generation,
        "address": getattr(view, "address", None),
        "skipped_count": getattr(view, "skipped_count", 0),
    }
    if isinstance(view, Failed):
        fields["message"] = view.message
    elif isinstance(view, Populated):
        fields["certificate_count"] = view.summary.count
        fields["total_display"] = view.summary.total_display
        fields["skipped_count"] = view.summary.skipped_count
        fields["rows"] = [
            {
                "certificate": row.certificate_id_short,
                "project": row.project_id_short,
                "amount": row.amount_display,
                "project_path": row.project_path,
            }
            for row in view.rows
        ]
    return DashboardViewCommittedEvent(**fields)


class DashboardService:
    """Owns the current dashboard view and the cycles that produce it."""

    def __init__(
        self,
        fetcher: ReceiptFetcher,
        presenter: PresentationAdapter,
        settings: Settings,
        event_bus: Any = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Receipt fetcher (injected).
            presenter: Presentation adapter (injected).
            settings: Application settings (uses settings.dashboard).
            event_bus: Optional bubus EventBus; each commit dispatches
                a DashboardViewCommittedEvent on it.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._fetcher = fetcher
        self._presenter = presenter
        self._settings = settings
        self._event_bus: Optional["EventBus"] = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._identity: WalletIdentity | None = None
        self._generation = 0
        self._view: ViewModel = Unauthenticated()
        self._tasks: set[asyncio.Task[ViewModel | None]] = set()

    @property
    def view(self) -> ViewModel:
        """The committed view for the latest resolved identity."""
        return self._view

    @property
    def identity(self) -> WalletIdentity | None:
        return self._identity

    @property
    def generation(self) -> int:
        return self._generation

    def on_identity_changed(
        self, identity: WalletIdentity
    ) -> asyncio.Task[ViewModel | None] | None:
        """Feed an identity reading. Starts a new cycle if the identity changed.

        Must be called from the running event loop. A Disconnected identity
        commits Unauthenticated immediately and issues no fetch. A Connected
        identity commits Loading and schedules the fetch.

        Returns:
            The cycle task when a fetch was scheduled, otherwise None.
        """
        if cycle_trigger(self._identity, identity) is CycleAction.NOOP:
            return None
        return self._start_cycle(identity)

    def refresh(self) -> asyncio.Task[ViewModel | None] | None:
        """Start a new cycle for the current identity (caller-level retry)."""
        if self._identity is None:
            return None
        return self._start_cycle(self._identity)

    def _start_cycle(
        self, identity: WalletIdentity
    ) -> asyncio.Task[ViewModel | None] | None:
        self._identity = identity
        self._generation += 1
        generation = self._generation
        decision = resolve(identity)
        if isinstance(decision, Skip):
            self._commit(Unauthenticated(), generation)
            return None

        self._commit(Loading(address=decision.address), generation)
        task = asyncio.create_task(self.run_cycle(identity, generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run_cycle(self, identity: WalletIdentity, generation: int) -> ViewModel | None:
        """Build the view for ``identity`` and commit it if ``generation`` is still current.

        Returns:
            The committed view, or None if a newer cycle superseded this one.
        """
        view = await self.build_view(identity)
        if generation != self._generation:
            self._logger.info(
                "dashboard_cycle_discarded_stale",
                cycle_generation=generation,
                current_generation=self._generation,
                discarded_state=view.state.value,
            )
            return None
        self._commit(view, generation)
        return view

    async def build_view(self, identity: WalletIdentity) -> ViewModel:
        """Run one full cycle for ``identity`` without touching the current view.

        Every failure from fetching or normalization is caught here and becomes
        a Failed view; nothing but cancellation propagates past the
        presentation adapter.
        """
        decision = resolve(identity)
        if isinstance(decision, Skip):
            return self._presenter.present(identity, None, [], None)

        with bound_contextvars(dashboard_address_masked=mask_address(decision.address)):
            try:
                records = await self._fetcher.fetch(decision.address)
                result = normalize_all(
                    records, self._settings.dashboard.malformed_amount_policy
                )
            except (FetchError, MalformedAmountError) as e:
                self._logger.warning(
                    "dashboard_cycle_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return self._presenter.present(identity, None, [], e)
            except Exception as e:
                self._logger.error(
                    "dashboard_cycle_unexpected_error",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=True,
                )
                return self._presenter.present(identity, None, [], e)

            summary = aggregate(result.records, skipped=result.skipped)
            self._logger.debug(
                "dashboard_cycle_aggregated",
                certificate_count=summary.count,
                total_display_amount=str(summary.total_display_amount),
                skipped_count=summary.skipped_count,
            )
            return self._presenter.present(identity, summary, result.records, None)

    def _commit(self, view: ViewModel, generation: int) -> None:
        self._view = view
        address = getattr(view, "address", None)
        self._logger.info(
            "dashboard_view_committed",
            view_state=view.state.value,
            cycle_generation=generation,
            address_masked=mask_address(address) if address else None,
        )
        if self._event_bus is None:
            return
        self._event_bus.dispatch(_committed_event(view, generation))

    async def aclose(self) -> None:
        """Cancel in-flight cycles and wait for them to finish."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
