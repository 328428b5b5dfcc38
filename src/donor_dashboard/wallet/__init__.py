"""Wallet identity providers."""

from donor_dashboard.wallet.provider import (
    IWalletIdentityProvider,
    SettingsWalletIdentityProvider,
    StaticWalletIdentityProvider,
)

__all__ = [
    "IWalletIdentityProvider",
    "SettingsWalletIdentityProvider",
    "StaticWalletIdentityProvider",
]
