"""Identity gate and cycle trigger."""

from donor_dashboard.services.identity_gate.identity_gate import (
    CycleAction,
    GateDecision,
    Proceed,
    Skip,
    cycle_trigger,
    resolve,
)

__all__ = ["CycleAction", "GateDecision", "Proceed", "Skip", "cycle_trigger", "resolve"]
