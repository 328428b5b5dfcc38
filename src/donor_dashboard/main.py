# -*- coding: utf-8 -*-
"""
Entry point for the donor dashboard.

Orchestrates: logging, settings, container, identity watcher, shutdown (SIGINT or CancelledError).
Identity flows: wallet provider -> IdentityWatcher -> DashboardService -> committed ViewModel
(dispatched on the event bus and logged by DashboardViewLogger).

Run with: python -m donor_dashboard.main
(WALLET__ADDRESS selects the donor; empty means disconnected.)

Notebook usage:
    from donor_dashboard.main import run
    await run()  # Interrupt kernel to stop.
"""
from __future__ import annotations

import asyncio
import signal
import structlog

from donor_dashboard.DI import Container
from donor_dashboard.config import get_settings
from donor_dashboard.exceptions import MissingRequiredConfigError
from donor_dashboard.logging.config import configure_logging
from donor_dashboard.utils import mask_address


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger = structlog.get_logger("main")
    ledger = settings.ledger
    endpoint_var, endpoint = (
        ("LEDGER__SUI_RPC_URL", ledger.sui_rpc_url)
        if ledger.backend == "rpc"
        else ("LEDGER__LEDGER_API_HOST", ledger.ledger_api_host)
    )
    if not endpoint.strip():
        logger.error(
            "main_missing_ledger_endpoint",
            ledger_backend=ledger.backend,
            message=f"{endpoint_var} is not set",
        )
        raise MissingRequiredConfigError(endpoint_var)

    container = Container()
    view_logger = container.view_logger()
    view_logger.start()
    watcher = container.identity_watcher()
    dashboard = container.dashboard_service()
    http_client = container.http_client()

    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    logger.info(
        "main_dashboard_started",
        ledger_backend=settings.ledger.backend,
        wallet_masked=mask_address(settings.wallet.address) if settings.wallet.address else None,
        poll_seconds=settings.wallet.poll_seconds,
    )
    watch_task = asyncio.create_task(watcher.watch())
    try:
        await shutdown_event.wait()
    finally:
        watch_task.cancel()
        try:
            await watch_task
        except asyncio.CancelledError:
            pass
        await dashboard.aclose()
        view_logger.stop()
        await http_client.aclose()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
