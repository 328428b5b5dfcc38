"""Domain models."""

from donor_dashboard.models.certificate import CertificateRecord, NormalizedRecord
from donor_dashboard.models.summary import AggregateSummary
from donor_dashboard.models.view_model import (
    Empty,
    Failed,
    Loading,
    Populated,
    RecordRow,
    SummaryView,
    Unauthenticated,
    ViewModel,
    ViewState,
)
from donor_dashboard.models.wallet_identity import (
    DISCONNECTED,
    Connected,
    Disconnected,
    WalletIdentity,
    identity_from_address,
)

__all__ = [
    "AggregateSummary",
    "CertificateRecord",
    "Connected",
    "DISCONNECTED",
    "Disconnected",
    "Empty",
    "Failed",
    "Loading",
    "NormalizedRecord",
    "Populated",
    "RecordRow",
    "SummaryView",
    "Unauthenticated",
    "ViewModel",
    "ViewState",
    "WalletIdentity",
    "identity_from_address",
]
