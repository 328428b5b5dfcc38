"""Application events (bubus)."""

from donor_dashboard.events.bus import EVENT_BUS_NAME, create_event_bus
from donor_dashboard.events.dashboard_events import DashboardViewCommittedEvent

__all__ = ["EVENT_BUS_NAME", "create_event_bus", "DashboardViewCommittedEvent"]
