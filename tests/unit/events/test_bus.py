# -*- coding: utf-8 -*-
"""Unit tests for the dashboard event bus factory."""

from __future__ import annotations

from collections.abc import Callable

from donor_dashboard.config import Settings
from donor_dashboard.events import EVENT_BUS_NAME, create_event_bus


async def test_event_bus_uses_configured_history_size(
    settings_factory: Callable[..., Settings],
) -> None:
    bus = create_event_bus(settings_factory(app={"event_history_size": 7}))

    assert bus.max_history_size == 7
    assert bus.name.startswith(EVENT_BUS_NAME)


async def test_each_call_builds_a_separate_bus(settings: Settings) -> None:
    assert create_event_bus(settings) is not create_event_bus(settings)
