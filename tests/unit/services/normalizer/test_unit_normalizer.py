# -*- coding: utf-8 -*-
"""Unit tests for the MIST -> SUI unit normalizer."""

from __future__ import annotations

from collections.abc import Callable
from decimal import MAX_PREC, Decimal, localcontext
from typing import Any

import pytest

from donor_dashboard.exceptions import MalformedAmountError
from donor_dashboard.models.certificate import CertificateRecord
from donor_dashboard.services.normalizer import (
    MIST_PER_SUI,
    normalize,
    normalize_all,
    parse_raw_amount,
)


@pytest.mark.parametrize(
    "raw",
    [0, 1, 999_999_999, 1_000_000_000, 2_500_000_000, 10**18, 10**18 + 1, 123456789012345678901234567890],
)
def test_normalize_is_exact_inverse_of_scale(
    raw: int, record_factory: Callable[..., CertificateRecord]
) -> None:
    normalized = normalize(record_factory(raw_amount=str(raw)))
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        assert normalized.display_amount * MIST_PER_SUI == raw


def test_normalize_keeps_record_fields(record_factory: Callable[..., CertificateRecord]) -> None:
    record = record_factory(certificate_id="0xabc", raw_amount="2500000000", project_id="0xp1")
    normalized = normalize(record)
    assert normalized.record is record
    assert normalized.certificate_id == "0xabc"
    assert normalized.project_id == "0xp1"
    assert normalized.display_amount == Decimal("2.5")


def test_normalize_does_not_round_sub_unit_amounts(
    record_factory: Callable[..., CertificateRecord],
) -> None:
    normalized = normalize(record_factory(raw_amount="1"))
    assert normalized.display_amount == Decimal("0.000000001")


def test_parse_raw_amount_strips_whitespace(record_factory: Callable[..., CertificateRecord]) -> None:
    assert parse_raw_amount(record_factory(raw_amount=" 42 ")) == 42


@pytest.mark.parametrize("raw", ["", "  ", "-1", "+5", "1.5", "1e9", "abc", "0x10", "1_000"])
def test_normalize_rejects_malformed_amounts(
    raw: str, record_factory: Callable[..., CertificateRecord]
) -> None:
    with pytest.raises(MalformedAmountError) as exc_info:
        normalize(record_factory(certificate_id="0xbad", raw_amount=raw))
    assert exc_info.value.certificate_id == "0xbad"
    assert exc_info.value.raw_amount == raw


def test_normalize_rejects_non_string_amount(project_id: str) -> None:
    record: Any = CertificateRecord(certificate_id="0xc", project_id=project_id, raw_amount=None)  # type: ignore[arg-type]
    with pytest.raises(MalformedAmountError):
        normalize(record)


def test_normalize_all_preserves_order(record_factory: Callable[..., CertificateRecord]) -> None:
    records = [
        record_factory(certificate_id="0xc3", raw_amount="3"),
        record_factory(certificate_id="0xc1", raw_amount="1"),
        record_factory(certificate_id="0xc2", raw_amount="2"),
    ]
    result = normalize_all(records)
    assert [r.certificate_id for r in result.records] == ["0xc3", "0xc1", "0xc2"]
    assert result.skipped == 0


def test_normalize_all_fail_policy_raises_on_first_malformed(
    record_factory: Callable[..., CertificateRecord],
) -> None:
    records = [
        record_factory(certificate_id="0xok", raw_amount="1"),
        record_factory(certificate_id="0xbad", raw_amount="oops"),
    ]
    with pytest.raises(MalformedAmountError) as exc_info:
        normalize_all(records, "fail")
    assert exc_info.value.certificate_id == "0xbad"


def test_normalize_all_skip_policy_drops_and_counts_malformed(
    record_factory: Callable[..., CertificateRecord],
) -> None:
    records = [
        record_factory(certificate_id="0xa", raw_amount="1000000000"),
        record_factory(certificate_id="0xb", raw_amount="-3"),
        record_factory(certificate_id="0xc", raw_amount="2000000000"),
        record_factory(certificate_id="0xd", raw_amount="1.5"),
    ]
    result = normalize_all(records, "skip")
    assert [r.certificate_id for r in result.records] == ["0xa", "0xc"]
    assert result.skipped == 2
