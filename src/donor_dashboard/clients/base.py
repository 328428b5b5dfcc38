"""Abstract interface for ledger query services (backend REST, Sui RPC, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from donor_dashboard.clients.schema import DonationReceiptSchema


class ILedgerQueryService(ABC):
    """Interface for looking up donation receipts held by a donor address."""

    @abstractmethod
    async def get_donation_history(self, address: str) -> list[DonationReceiptSchema]:
        """Return raw receipts for ``address`` in service order.

        Raises:
            LedgerAPIError: On transport or service-level failure.
        """
        ...
