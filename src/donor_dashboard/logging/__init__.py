"""Logging setup (structlog + optional Logfire)."""

from donor_dashboard.logging.config import (
    build_processors,
    configure_logging,
    mask_wallet_addresses,
)

__all__ = ["build_processors", "configure_logging", "mask_wallet_addresses"]
