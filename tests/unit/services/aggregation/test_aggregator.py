# -*- coding: utf-8 -*-
"""Unit tests for aggregate()."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from decimal import Decimal

from donor_dashboard.models.certificate import NormalizedRecord
from donor_dashboard.models.summary import AggregateSummary
from donor_dashboard.services.aggregation import aggregate


def test_aggregate_empty_is_zero() -> None:
    summary = aggregate([])
    assert summary.count == 0
    assert summary.total_display_amount == Decimal(0)
    assert summary == AggregateSummary.empty()


def test_aggregate_empty_is_idempotent() -> None:
    assert aggregate([]) == aggregate([])


def test_aggregate_counts_and_sums(normalized_factory: Callable[..., NormalizedRecord]) -> None:
    records = [
        normalized_factory("0xc1", "2500000000"),
        normalized_factory("0xc2", "1000000000"),
    ]
    summary = aggregate(records)
    assert summary.count == 2
    assert summary.total_display_amount == Decimal("3.5")


def test_aggregate_is_order_independent(normalized_factory: Callable[..., NormalizedRecord]) -> None:
    records = [
        normalized_factory("0xc1", "1"),
        normalized_factory("0xc2", "999999999999999999"),
        normalized_factory("0xc3", "123456789"),
        normalized_factory("0xc4", "10000000000000000000000"),
    ]
    expected = aggregate(records)
    for perm in itertools.permutations(records):
        assert aggregate(list(perm)) == expected


def test_aggregate_does_not_deduplicate(normalized_factory: Callable[..., NormalizedRecord]) -> None:
    record = normalized_factory("0xsame", "1000000000")
    summary = aggregate([record, record])
    assert summary.count == 2
    assert summary.total_display_amount == Decimal("2")


def test_aggregate_sum_stays_exact_past_default_precision(
    normalized_factory: Callable[..., NormalizedRecord],
) -> None:
    big = "1" * 40
    summary = aggregate([normalized_factory("0xa", big), normalized_factory("0xb", "1")])
    assert summary.total_display_amount == Decimal(f"{int(big) + 1}E-9")


def test_aggregate_carries_skipped_count(normalized_factory: Callable[..., NormalizedRecord]) -> None:
    summary = aggregate([normalized_factory()], skipped=3)
    assert summary.skipped_count == 3
    assert summary.count == 1
