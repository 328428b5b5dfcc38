"""Ledger service receipt types shared by every backend."""

from __future__ import annotations

from typing import TypedDict


class DonationReceiptSchema(TypedDict, total=False):
    """GET /api/donors/{address} item. Keys match the backend response (snake_case)."""

    id: str
    """Object id of the minted DonationReceipt."""
    project_id: str
    donor: str
    amount: str
    """Donated amount in MIST, as a decimal integer string."""
