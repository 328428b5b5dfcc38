"""Dashboard events (emitted by DashboardService when a view is committed)."""

from __future__ import annotations

from bubus import BaseEvent  # type: ignore[import-untyped]
from pydantic import Field


class DashboardViewCommittedEvent(BaseEvent[None]):
    """Emitted each time the current-view slot is written.

    Handlers run after dispatch returns, possibly after later commits, so the
    event carries a snapshot of the committed view instead of pointing at
    DashboardService.view.
    """

    state: str
    """ViewState value: UNAUTHENTICATED, LOADING, FAILED, EMPTY or POPULATED."""

    generation: int
    """Cycle generation that produced the view."""

    address: str | None = None
    certificate_count: int | None = None
    total_display: str | None = None
    """Formatted total, only for POPULATED."""

    skipped_count: int = 0
    message: str | None = None
    """User-facing failure text, only for FAILED."""

    rows: list[dict[str, str]] = Field(default_factory=list)
    """Per-certificate display fields (certificate, project, amount, project_path)."""
