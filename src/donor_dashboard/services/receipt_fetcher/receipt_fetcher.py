"""Receipt fetcher: one ledger query per call, raw items validated into CertificateRecords."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog
from structlog.contextvars import bound_contextvars

from donor_dashboard.exceptions import FetchError, LedgerAPIError
from donor_dashboard.models.certificate import CertificateRecord
from donor_dashboard.utils.validation import mask_address

if TYPE_CHECKING:
    from donor_dashboard.clients.base import ILedgerQueryService

_REQUIRED_FIELDS = ("id", "project_id", "amount")


def record_from_response(item: Any, index: int) -> CertificateRecord:
    """Build a CertificateRecord from one ledger item.

    The amount is only checked for presence and type here; its numeric
    validity is the unit normalizer's concern.

    Raises:
        FetchError: If the item is not an object or a required field is
            missing or not a string.
    """
    if not isinstance(item, dict):
        raise FetchError(f"Receipt #{index} is not an object: {type(item).__name__}")
    data = cast(dict[str, Any], item)
    for field in _REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str):
            raise FetchError(
                f"Receipt #{index} has missing or non-string field {field!r}"
            )
    donor = data.get("donor")
    return CertificateRecord(
        certificate_id=data["id"],
        project_id=data["project_id"],
        raw_amount=data["amount"],
        donor=str(donor) if donor is not None else None,
    )


class ReceiptFetcher:
    """Fetches the donation certificates held by an address from the ledger service.

    Never retries: each fetch() issues exactly one query and surfaces at most
    one FetchError. Retrying is the caller's decision.
    """

    def __init__(
        self,
        ledger: ILedgerQueryService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            ledger: Ledger query service (backend REST or Sui RPC, injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._ledger = ledger
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def fetch(self, address: str) -> list[CertificateRecord]:
        """Return the certificates currently associated with ``address``, in ledger order.

        Args:
            address: Opaque address from a Connected identity; not validated here.

        Raises:
            FetchError: On transport/service failure, a malformed response or
                any other ledger error (the original is kept as ``cause``).
        """
        with bound_contextvars(fetch_address_masked=mask_address(address)):
            try:
                items = await self._ledger.get_donation_history(address)
            except (LedgerAPIError, OSError, asyncio.TimeoutError) as e:
                self._logger.warning(
                    "receipt_fetch_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    http_status_code=getattr(e, "status_code", None),
                )
                raise FetchError(str(e), address=address, cause=e) from e
            except Exception as e:
                # CancelledError is a BaseException and still propagates
                self._logger.error(
                    "receipt_fetch_unexpected_error",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=True,
                )
                raise FetchError(
                    f"Unexpected ledger failure: {type(e).__name__}: {e}",
                    address=address,
                    cause=e,
                ) from e

            if not isinstance(items, list):
                raise FetchError(
                    f"Ledger returned {type(items).__name__}, expected a list",
                    address=address,
                )
            try:
                records = [
                    record_from_response(item, i)
                    for i, item in enumerate(cast(list[Any], items))
                ]
            except FetchError as e:
                e.address = address
                self._logger.warning(
                    "receipt_fetch_malformed_response",
                    error_message=str(e),
                )
                raise

            self._logger.debug("receipt_fetch_completed", receipt_count=len(records))
            return records
