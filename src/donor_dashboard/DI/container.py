# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from donor_dashboard.clients.base import ILedgerQueryService
from donor_dashboard.clients.http import AsyncHttpClient
from donor_dashboard.clients.ledger_api import LedgerApiClient
from donor_dashboard.clients.sui_rpc import SuiRpcClient
from donor_dashboard.config import DashboardSettings, Settings, get_settings
from donor_dashboard.events.bus import create_event_bus
from donor_dashboard.services.dashboard import (
    DashboardService,
    DashboardViewLogger,
    IdentityWatcher,
)
from donor_dashboard.services.presentation import PresentationAdapter
from donor_dashboard.services.receipt_fetcher import ReceiptFetcher
from donor_dashboard.wallet import SettingsWalletIdentityProvider


def _select_ledger(
    settings: Settings,
    ledger_api: LedgerApiClient,
    sui_rpc: SuiRpcClient,
) -> ILedgerQueryService:
    """Pick the ledger query service named by settings.ledger.backend."""
    if settings.ledger.backend == "rpc":
        return sui_rpc
    return ledger_api


def _dashboard_settings(settings: Settings) -> DashboardSettings:
    return settings.dashboard


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, ledger backend, event bus, cycle services."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    ledger_api_client = providers.Singleton(
        LedgerApiClient,
        http_client=http_client,
        settings=config,
    )

    sui_rpc_client = providers.Singleton(
        SuiRpcClient,
        http_client=http_client,
        settings=config,
    )

    ledger = providers.Callable(
        _select_ledger,
        settings=config,
        ledger_api=ledger_api_client,
        sui_rpc=sui_rpc_client,
    )

    event_bus = providers.Singleton(
        create_event_bus,
        settings=config,
    )

    receipt_fetcher = providers.Singleton(
        ReceiptFetcher,
        ledger=ledger,
    )

    presentation_adapter = providers.Singleton(
        PresentationAdapter,
        settings=providers.Callable(_dashboard_settings, config),
    )

    dashboard_service = providers.Singleton(
        DashboardService,
        fetcher=receipt_fetcher,
        presenter=presentation_adapter,
        settings=config,
        event_bus=event_bus,
    )

    wallet_provider = providers.Singleton(
        SettingsWalletIdentityProvider,
        settings=config,
    )

    identity_watcher = providers.Singleton(
        IdentityWatcher,
        settings=config,
        provider=wallet_provider,
        dashboard=dashboard_service,
    )

    view_logger = providers.Singleton(
        DashboardViewLogger,
        event_bus=event_bus,
    )
