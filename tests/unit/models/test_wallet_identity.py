# -*- coding: utf-8 -*-
"""Unit tests for WalletIdentity helpers and identity providers."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from donor_dashboard.config import Settings
from donor_dashboard.models.wallet_identity import (
    DISCONNECTED,
    Connected,
    Disconnected,
    identity_from_address,
)
from donor_dashboard.wallet import SettingsWalletIdentityProvider, StaticWalletIdentityProvider


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_identity_from_blank_address_is_disconnected(raw: str | None) -> None:
    assert identity_from_address(raw) == DISCONNECTED


def test_identity_from_address_strips(wallet: str) -> None:
    assert identity_from_address(f" {wallet}\n") == Connected(wallet)


def test_identities_compare_by_value() -> None:
    assert Connected("0xA") == Connected("0xA")
    assert Connected("0xA") != Connected("0xB")
    assert Disconnected() == DISCONNECTED


def test_static_provider_set_and_read() -> None:
    provider = StaticWalletIdentityProvider()
    assert provider.current() == DISCONNECTED
    provider.set(Connected("0xA"))
    assert provider.current() == Connected("0xA")


def test_settings_provider_reads_wallet_address(
    settings_factory: Callable[..., Settings], wallet: str
) -> None:
    connected = SettingsWalletIdentityProvider(settings_factory(wallet={"address": wallet}))
    disconnected = SettingsWalletIdentityProvider(settings_factory(wallet={"address": ""}))
    assert connected.current() == Connected(wallet)
    assert disconnected.current() == DISCONNECTED
