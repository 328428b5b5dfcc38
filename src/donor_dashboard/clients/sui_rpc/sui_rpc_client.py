"""Sui JSON-RPC client for reading donation receipts straight from a fullnode."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog
from structlog.contextvars import bound_contextvars

from donor_dashboard.clients.base import ILedgerQueryService
from donor_dashboard.clients.schema import DonationReceiptSchema
from donor_dashboard.clients.sui_rpc.schema import (
    ObjectDataSchema,
    ObjectResponseSchema,
    OwnedObjectsPageSchema,
)
from donor_dashboard.exceptions import LedgerAPIError
from donor_dashboard.utils.validation import mask_address

if TYPE_CHECKING:
    from donor_dashboard.clients.http import AsyncHttpClient
    from donor_dashboard.config import Settings

METHOD_GET_OWNED_OBJECTS = "suix_getOwnedObjects"


def _id_value(raw: Any) -> str | None:
    """Unwrap a Move ``ID``/``UID`` field: either ``"0x.."`` or ``{"id": "0x.."}``."""
    if isinstance(raw, dict):
        raw = cast(dict[str, Any], raw).get("id")
    if raw is None:
        return None
    return str(raw)


def receipt_from_object(
    data: ObjectDataSchema, *, url: str | None = None
) -> DonationReceiptSchema | None:
    """Map a DonationReceipt Move object to the ledger receipt shape.

    Returns None for anything that is not a Move object (e.g. packages).
    Fields missing on chain stay missing so the fetcher can reject them.

    Raises:
        LedgerAPIError: If ``data``, its ``content`` or the Move ``fields``
            are present but not JSON objects.
    """
    if not isinstance(data, dict):
        raise LedgerAPIError(
            f"Malformed object data: {type(data).__name__}", url=url
        )
    content = data.get("content") or {}
    if not isinstance(content, dict):
        raise LedgerAPIError(
            f"Malformed object content: {type(content).__name__}", url=url
        )
    if content.get("dataType") != "moveObject":
        return None
    fields = content.get("fields") or {}
    if not isinstance(fields, dict):
        raise LedgerAPIError(
            f"Malformed Move object fields: {type(fields).__name__}", url=url
        )
    receipt: DonationReceiptSchema = {}
    object_id = data.get("objectId")
    if object_id is not None:
        receipt["id"] = str(object_id)
    project_id = _id_value(fields.get("project_id"))
    if project_id is not None:
        receipt["project_id"] = project_id
    donor = fields.get("donor")
    if donor is not None:
        receipt["donor"] = str(donor)
    amount = fields.get("amount")
    if isinstance(amount, int) and not isinstance(amount, bool):
        # u64 normally arrives as a string; some nodes send small values as numbers
        amount = str(amount)
    if amount is not None:
        receipt["amount"] = amount
    return receipt


class SuiRpcClient(ILedgerQueryService):
    """Client for Sui fullnode JSON-RPC. Lists DonationReceipt objects owned by a donor."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the RPC client.

        Args:
            http_client: HTTP client for POST requests (JSON-RPC).
            settings: Configuration (uses settings.ledger.sui_rpc_url, receipt_type, paging).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._request_id = 0

    def _rpc_url(self) -> str:
        return self._settings.ledger.sui_rpc_url.rstrip("/")

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform a JSON-RPC 2.0 call and return its ``result``.

        Raises:
            LedgerAPIError: If the transport fails, the body is not a JSON-RPC
                object, or the node answers with an ``error`` member.
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        url = self._rpc_url()
        response = await self._http.post(url, json=payload)
        if not isinstance(response, dict):
            raise LedgerAPIError(
                f"Unexpected RPC response type: {type(response).__name__}", url=url
            )
        resp_dict = cast(dict[str, Any], response)
        if resp_dict.get("error") is not None:
            err = resp_dict["error"]
            if isinstance(err, dict):
                err_d = cast(dict[str, Any], err)
                msg = str(err_d.get("message", err_d))
            else:
                msg = str(err)
            raise LedgerAPIError(f"RPC error: {msg}", url=url)
        return resp_dict.get("result")

    async def get_owned_objects(
        self,
        owner: str,
        struct_type: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> OwnedObjectsPageSchema:
        """Fetch one page of objects of ``struct_type`` owned by ``owner``."""
        query = {
            "filter": {"StructType": struct_type},
            "options": {"showType": True, "showContent": True, "showOwner": True},
        }
        result = await self.call(
            METHOD_GET_OWNED_OBJECTS,
            [owner, query, cursor, limit or self._settings.ledger.page_size],
        )
        if not isinstance(result, dict):
            raise LedgerAPIError(
                f"Unexpected {METHOD_GET_OWNED_OBJECTS} result type: {type(result).__name__}",
                url=self._rpc_url(),
            )
        return cast(OwnedObjectsPageSchema, result)

    async def get_donation_history(self, address: str) -> list[DonationReceiptSchema]:
        """List every DonationReceipt owned by ``address``, following pagination.

        Args:
            address: Donor wallet address (Sui 0x..., passed through unvalidated).

        Returns:
            Receipts in node order.

        Raises:
            LedgerAPIError: On RPC failure or a page whose shape is not the
                documented owned-objects response.
        """
        ledger = self._settings.ledger
        url = self._rpc_url()
        receipts: list[DonationReceiptSchema] = []
        cursor: str | None = None
        pages = 0
        with bound_contextvars(ledger_address_masked=mask_address(address)):
            while pages < ledger.max_pages:
                page = await self.get_owned_objects(
                    address, ledger.receipt_type, cursor=cursor
                )
                pages += 1
                items = page.get("data") or []
                if not isinstance(items, list):
                    raise LedgerAPIError(
                        f"Malformed owned objects page: data is {type(items).__name__}",
                        url=url,
                    )
                for item in cast(list[ObjectResponseSchema], items):
                    if not isinstance(item, dict):
                        raise LedgerAPIError(
                            f"Malformed owned object entry: {type(item).__name__}",
                            url=url,
                        )
                    data = item.get("data")
                    if data is None:
                        continue
                    receipt = receipt_from_object(data, url=url)
                    if receipt is not None:
                        receipts.append(receipt)
                cursor = page.get("nextCursor")
                if not page.get("hasNextPage") or cursor is None:
                    break
            else:
                self._logger.warning(
                    "sui_rpc_donation_history_truncated",
                    sui_rpc_max_pages=ledger.max_pages,
                )
            self._logger.debug(
                "sui_rpc_donation_history_fetched",
                ledger_receipt_count=len(receipts),
                sui_rpc_pages=pages,
            )
        return receipts
