"""Identity gate: decides whether a cycle should query the ledger at all.

Both functions are pure; they read identities and never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from donor_dashboard.models.wallet_identity import Connected, Disconnected, WalletIdentity


@dataclass(frozen=True, slots=True)
class Skip:
    """No identity: skip the fetch and show the unauthenticated view."""


@dataclass(frozen=True, slots=True)
class Proceed:
    """Identity resolved: fetch receipts for ``address``."""

    address: str


GateDecision = Union[Skip, Proceed]


class CycleAction(str, Enum):
    """Outcome of comparing the previous and current identity."""

    NOOP = "NOOP"
    START_NEW_CYCLE = "START_NEW_CYCLE"


def resolve(identity: WalletIdentity) -> GateDecision:
    """Map a wallet identity to a gate decision.

    A Connected identity whose address is blank is treated as disconnected.
    """
    if isinstance(identity, Connected) and identity.address.strip():
        return Proceed(identity.address.strip())
    return Skip()


def cycle_trigger(
    previous: WalletIdentity | None,
    current: WalletIdentity,
) -> CycleAction:
    """Decide whether an identity reading starts a new aggregation cycle.

    ``previous`` is None before the first reading, which always starts a cycle.
    Identities compare by value, so re-reading the same address is a no-op.
    """
    if previous is None:
        return CycleAction.START_NEW_CYCLE
    if isinstance(previous, Disconnected) and isinstance(current, Disconnected):
        return CycleAction.NOOP
    if previous == current:
        return CycleAction.NOOP
    return CycleAction.START_NEW_CYCLE
