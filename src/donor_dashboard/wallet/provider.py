"""Wallet identity providers: the single synchronous read the core makes per cycle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from donor_dashboard.models.wallet_identity import (
    DISCONNECTED,
    WalletIdentity,
    identity_from_address,
)

if TYPE_CHECKING:
    from donor_dashboard.config import Settings


class IWalletIdentityProvider(ABC):
    """Exposes the current wallet connection state."""

    @abstractmethod
    def current(self) -> WalletIdentity:
        """Return the identity right now. Must not block."""
        ...


class StaticWalletIdentityProvider(IWalletIdentityProvider):
    """Identity held in memory; ``set()`` simulates connect, switch and disconnect."""

    def __init__(self, identity: WalletIdentity = DISCONNECTED) -> None:
        self._identity = identity

    def current(self) -> WalletIdentity:
        return self._identity

    def set(self, identity: WalletIdentity) -> None:
        self._identity = identity


class SettingsWalletIdentityProvider(IWalletIdentityProvider):
    """Identity from settings.wallet.address (env WALLET__ADDRESS). Empty means disconnected."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def current(self) -> WalletIdentity:
        return identity_from_address(self._settings.wallet.address)
