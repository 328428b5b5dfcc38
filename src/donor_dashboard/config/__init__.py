"""Configuration subpackage."""

from donor_dashboard.config.config import (
    AppSettings,
    DashboardSettings,
    LedgerSettings,
    LoggingSettings,
    MalformedAmountPolicy,
    Settings,
    WalletSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DashboardSettings",
    "LedgerSettings",
    "LoggingSettings",
    "MalformedAmountPolicy",
    "Settings",
    "WalletSettings",
    "get_settings",
]
