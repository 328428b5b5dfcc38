"""Identity watcher: polls the wallet provider and feeds readings to DashboardService."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from donor_dashboard.models.view_model import ViewModel

if TYPE_CHECKING:
    from donor_dashboard.config import Settings
    from donor_dashboard.services.dashboard.dashboard_service import DashboardService
    from donor_dashboard.wallet.provider import IWalletIdentityProvider


class IdentityWatcher:
    """Turns a pull-based wallet provider into identity-change notifications."""

    def __init__(
        self,
        settings: Settings,
        provider: IWalletIdentityProvider,
        dashboard: DashboardService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the watcher.

        Args:
            settings: Application settings (uses settings.wallet.poll_seconds).
            provider: Wallet identity provider (injected).
            dashboard: Dashboard service receiving the readings (injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._provider = provider
        self._dashboard = dashboard
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def poll_once(self) -> asyncio.Task[ViewModel | None] | None:
        """Read the provider once and forward the identity."""
        return self._dashboard.on_identity_changed(self._provider.current())

    async def watch(self, *, poll_seconds: float | None = None) -> None:
        """Poll the provider until cancelled.

        Args:
            poll_seconds: Polling interval; default from settings.wallet.poll_seconds.
        """
        if poll_seconds is None:
            poll_seconds = self._settings.wallet.poll_seconds
        if poll_seconds <= 0:
            poll_seconds = 1.0

        self._logger.debug("identity_watch_started", watch_poll_seconds=poll_seconds)
        try:
            while True:
                self.poll_once()
                await asyncio.sleep(poll_seconds)
        except asyncio.CancelledError:
            self._logger.debug("identity_watch_stopped", watch_stop_reason="cancelled")
            raise
