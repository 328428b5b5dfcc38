"""Custom exceptions for ledger access and donation record processing."""

from __future__ import annotations


class DonorDashboardError(Exception):
    """Base exception for donor dashboard errors."""

    pass


class MissingRequiredConfigError(DonorDashboardError):
    """Raised when a required configuration value is missing."""

    pass


class LedgerAPIError(DonorDashboardError):
    """Raised when a ledger service request (REST or JSON-RPC) fails."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class FetchError(DonorDashboardError):
    """Raised by the receipt fetcher when donation records could not be obtained.

    Covers transport failures, service errors and malformed responses. One
    FetchError is raised per fetch attempt; nothing is retried.
    """

    def __init__(
        self,
        message: str,
        *,
        address: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.address = address
        self.cause = cause


class MalformedAmountError(DonorDashboardError):
    """Raised when a certificate amount is not a non-negative integer string."""

    def __init__(self, certificate_id: str, raw_amount: object) -> None:
        super().__init__(
            f"Malformed amount {raw_amount!r} on certificate {certificate_id}"
        )
        self.certificate_id = certificate_id
        self.raw_amount = raw_amount
