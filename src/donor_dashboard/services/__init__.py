"""Services: identity gate, fetching, normalization, aggregation, presentation and cycles."""

from donor_dashboard.services.aggregation import aggregate
from donor_dashboard.services.dashboard import DashboardService, IdentityWatcher
from donor_dashboard.services.identity_gate import cycle_trigger, resolve
from donor_dashboard.services.normalizer import normalize, normalize_all
from donor_dashboard.services.presentation import PresentationAdapter
from donor_dashboard.services.receipt_fetcher import ReceiptFetcher

__all__ = [
    "DashboardService",
    "IdentityWatcher",
    "PresentationAdapter",
    "ReceiptFetcher",
    "aggregate",
    "cycle_trigger",
    "normalize",
    "normalize_all",
    "resolve",
]
