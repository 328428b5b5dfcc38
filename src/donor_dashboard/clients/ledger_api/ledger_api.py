# -*- coding: utf-8 -*-
"""Funding platform backend client (donation receipts by donor)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, List, Optional, cast
from urllib.parse import quote
from structlog.contextvars import bound_contextvars

from donor_dashboard.clients.base import ILedgerQueryService
from donor_dashboard.clients.schema import DonationReceiptSchema
from donor_dashboard.config import Settings
from donor_dashboard.exceptions import LedgerAPIError
from donor_dashboard.utils.validation import mask_address

if TYPE_CHECKING:
    from donor_dashboard.clients.http import AsyncHttpClient


class LedgerApiClient(ILedgerQueryService):
    """Client for the funding backend's /api/donors endpoint."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.ledger.ledger_api_host).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.ledger.ledger_api_host.rstrip("/")

    async def get_donation_history(self, address: str) -> List[DonationReceiptSchema]:
        """Fetch every donation receipt owned by a donor address.

        The backend answers with a JSON array, or ``null`` when the donor owns
        no receipts; both map to a list.

        Args:
            address: Donor wallet address, passed through unvalidated.

        Returns:
            Receipt items in the order the backend returned them.

        Raises:
            LedgerAPIError: On transport failure or a non-list response body.
        """
        with bound_contextvars(ledger_address_masked=mask_address(address)):
            url = f"{self._base_url()}/api/donors/{quote(address, safe='')}"
            data = await self._http.get(url)
            if data is None:
                return []
            if not isinstance(data, list):
                self._logger.warning(
                    "ledger_api_donation_history_non_list",
                    ledger_response_type=type(data).__name__,
                )
                raise LedgerAPIError(
                    f"Unexpected donation history response type: {type(data).__name__}",
                    url=url,
                )
            items = cast(list[Any], data)
            self._logger.debug(
                "ledger_api_donation_history_fetched",
                ledger_receipt_count=len(items),
            )
            return cast(List[DonationReceiptSchema], items)
