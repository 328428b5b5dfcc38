"""Exceptions subpackage."""

from donor_dashboard.exceptions.exceptions import (
    DonorDashboardError,
    FetchError,
    LedgerAPIError,
    MalformedAmountError,
    MissingRequiredConfigError,
)

__all__ = [
    "DonorDashboardError",
    "FetchError",
    "LedgerAPIError",
    "MalformedAmountError",
    "MissingRequiredConfigError",
]
