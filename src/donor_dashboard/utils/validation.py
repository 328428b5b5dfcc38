"""Helpers for wallet addresses and on-chain identifiers."""

from __future__ import annotations


def mask_address(addr: str | None) -> str:
    """Return a masked wallet address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"


def truncate_identifier(value: str, prefix_length: int, *, suffix: str = "...") -> str:
    """Return the first ``prefix_length`` characters followed by ``suffix``.

    Values no longer than the prefix are returned unchanged.
    """
    if prefix_length <= 0:
        raise ValueError("prefix_length must be positive")
    if len(value) <= prefix_length:
        return value
    return f"{value[:prefix_length]}{suffix}"
