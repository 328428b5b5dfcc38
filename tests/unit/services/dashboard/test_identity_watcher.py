# -*- coding: utf-8 -*-
"""Unit tests for IdentityWatcher."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest

from donor_dashboard.config import Settings
from donor_dashboard.models.wallet_identity import DISCONNECTED, Connected
from donor_dashboard.services.dashboard import IdentityWatcher
from donor_dashboard.wallet import StaticWalletIdentityProvider


def _watcher(settings: Settings, provider: Any, dashboard: Any) -> IdentityWatcher:
    return IdentityWatcher(settings=settings, provider=provider, dashboard=dashboard)


def test_poll_once_forwards_current_identity(settings: Settings) -> None:
    provider = StaticWalletIdentityProvider(Connected("0xA"))
    dashboard: Any = SimpleNamespace(on_identity_changed=MagicMock(return_value=None))

    _watcher(settings, provider, dashboard).poll_once()
    provider.set(DISCONNECTED)
    _watcher(settings, provider, dashboard).poll_once()

    assert [c.args[0] for c in dashboard.on_identity_changed.call_args_list] == [
        Connected("0xA"),
        DISCONNECTED,
    ]


async def test_watch_polls_until_cancelled(settings: Settings) -> None:
    provider = StaticWalletIdentityProvider(Connected("0xA"))
    dashboard: Any = SimpleNamespace(on_identity_changed=MagicMock(return_value=None))
    watcher = _watcher(settings, provider, dashboard)

    task = asyncio.create_task(watcher.watch(poll_seconds=0.01))
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert dashboard.on_identity_changed.call_count >= 2
