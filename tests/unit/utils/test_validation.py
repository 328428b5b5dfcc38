# -*- coding: utf-8 -*-
"""Unit tests for address and identifier helpers."""

from __future__ import annotations

import pytest

from donor_dashboard.utils.validation import mask_address, truncate_identifier


def test_mask_address_keeps_prefix_and_suffix(wallet: str) -> None:
    assert mask_address(wallet) == f"{wallet[:6]}...{wallet[-4:]}"


@pytest.mark.parametrize("addr", [None, "", "0x123"])
def test_mask_address_hides_short_or_missing(addr: str | None) -> None:
    assert mask_address(addr) == "***"


def test_truncate_identifier_long_value() -> None:
    assert truncate_identifier("0x0123456789abcdef", 12) == "0x0123456789..."


def test_truncate_identifier_short_value_unchanged() -> None:
    assert truncate_identifier("c1", 12) == "c1"
    assert truncate_identifier("0x0123456789", 12) == "0x0123456789"


def test_truncate_identifier_rejects_non_positive_prefix() -> None:
    with pytest.raises(ValueError):
        truncate_identifier("0xabc", 0)
