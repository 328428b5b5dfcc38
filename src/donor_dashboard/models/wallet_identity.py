"""WalletIdentity: connection state read from the wallet provider.

Either Connected(address) or Disconnected. The address is an opaque token;
only the ledger service interprets it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Connected:
    """A wallet is connected and exposes an account address."""

    address: str


@dataclass(frozen=True, slots=True)
class Disconnected:
    """No wallet is connected."""


WalletIdentity = Union[Connected, Disconnected]

DISCONNECTED = Disconnected()


def identity_from_address(address: str | None) -> WalletIdentity:
    """Build an identity from a raw provider value. Blank or None means disconnected."""
    if address is None or not address.strip():
        return DISCONNECTED
    return Connected(address.strip())
