"""Ledger receipt fetching."""

from donor_dashboard.services.receipt_fetcher.receipt_fetcher import (
    ReceiptFetcher,
    record_from_response,
)

__all__ = ["ReceiptFetcher", "record_from_response"]
