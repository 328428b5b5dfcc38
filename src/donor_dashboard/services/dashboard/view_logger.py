# -*- coding: utf-8 -*-
"""DashboardViewLogger: listens to DashboardViewCommittedEvent and logs each committed view."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from donor_dashboard.events.dashboard_events import DashboardViewCommittedEvent
from donor_dashboard.utils.validation import mask_address

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]


class DashboardViewLogger:
    """Subscribes to DashboardViewCommittedEvent and logs the view it carries."""

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def start(self) -> None:
        """Subscribe to DashboardViewCommittedEvent."""
        self._event_bus.on(DashboardViewCommittedEvent, self._on_committed)
        self._logger.debug("dashboard_view_logger_started")

    def stop(self) -> None:
        """Unsubscribe from DashboardViewCommittedEvent."""
        key = DashboardViewCommittedEvent.__name__
        handlers = getattr(self._event_bus, "handlers", {})
        if key in handlers:
            handlers[key] = [h for h in handlers[key] if h != self._on_committed]
        self._logger.debug("dashboard_view_logger_stopped")

    def _on_committed(self, event: DashboardViewCommittedEvent) -> None:
        # rows come from the event, never from the service's current view
        for row in event.rows:
            self._logger.info(
                "dashboard_view_row",
                cycle_generation=event.generation,
                certificate=row.get("certificate"),
                project=row.get("project"),
                amount=row.get("amount"),
                project_path=row.get("project_path"),
            )
        self._logger.info(
            "dashboard_view_logged",
            view_state=event.state,
            cycle_generation=event.generation,
            address_masked=mask_address(event.address) if event.address else None,
            certificate_count=event.certificate_count,
            total_display=event.total_display,
            skipped_count=event.skipped_count,
            failure_message=event.message,
        )
