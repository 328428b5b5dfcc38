"""Donor dashboard: wallet-scoped donation certificate aggregation."""

from donor_dashboard.clients import AsyncHttpClient, LedgerApiClient, SuiRpcClient
from donor_dashboard.config import get_settings
from donor_dashboard.DI import Container
from donor_dashboard.services import DashboardService, ReceiptFetcher

__version__ = "0.0.1"
__all__ = [
    "AsyncHttpClient",
    "Container",
    "DashboardService",
    "LedgerApiClient",
    "ReceiptFetcher",
    "SuiRpcClient",
    "get_settings",
]
