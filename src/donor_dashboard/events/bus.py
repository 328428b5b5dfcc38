"""Application event bus (bubus) carrying committed dashboard views to subscribers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bubus import EventBus  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from donor_dashboard.config import Settings

EVENT_BUS_NAME = "DonorDashboard"


def create_event_bus(settings: Settings) -> EventBus:
    """Build the dashboard event bus.

    One bus per container; history is bounded by settings.app.event_history_size
    and nothing is written ahead to disk.
    """
    return EventBus(
        name=EVENT_BUS_NAME,
        max_history_size=settings.app.event_history_size,
        wal_path=None,
    )
