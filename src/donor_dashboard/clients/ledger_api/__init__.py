"""Funding backend REST client."""

from donor_dashboard.clients.ledger_api.ledger_api import LedgerApiClient
from donor_dashboard.clients.schema import DonationReceiptSchema

__all__ = ["LedgerApiClient", "DonationReceiptSchema"]
