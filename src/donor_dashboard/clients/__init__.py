"""HTTP and ledger service clients."""

from donor_dashboard.clients.base import ILedgerQueryService
from donor_dashboard.clients.http import AsyncHttpClient
from donor_dashboard.clients.ledger_api import LedgerApiClient
from donor_dashboard.clients.schema import DonationReceiptSchema
from donor_dashboard.clients.sui_rpc import SuiRpcClient

__all__ = [
    "AsyncHttpClient",
    "DonationReceiptSchema",
    "ILedgerQueryService",
    "LedgerApiClient",
    "SuiRpcClient",
]
