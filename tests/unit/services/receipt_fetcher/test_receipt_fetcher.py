# -*- coding: utf-8 -*-
"""Unit tests for ReceiptFetcher."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from donor_dashboard.exceptions import FetchError, LedgerAPIError
from donor_dashboard.services.receipt_fetcher import ReceiptFetcher, record_from_response


def _fetcher(ledger: Any) -> ReceiptFetcher:
    return ReceiptFetcher(ledger=ledger)


async def test_fetch_returns_records_in_ledger_order(
    wallet: str, receipt_factory: Callable[..., dict[str, Any]]
) -> None:
    ledger: Any = SimpleNamespace(
        get_donation_history=AsyncMock(
            return_value=[
                receipt_factory(id="0xc2", amount="1000000000"),
                receipt_factory(id="0xc1", amount="2500000000"),
            ]
        )
    )

    records = await _fetcher(ledger).fetch(wallet)

    ledger.get_donation_history.assert_awaited_once_with(wallet)
    assert [r.certificate_id for r in records] == ["0xc2", "0xc1"]
    assert records[1].raw_amount == "2500000000"
    assert records[0].donor == wallet


async def test_fetch_empty_list(wallet: str) -> None:
    ledger: Any = SimpleNamespace(get_donation_history=AsyncMock(return_value=[]))
    assert await _fetcher(ledger).fetch(wallet) == []


@pytest.mark.parametrize(
    "error",
    [
        LedgerAPIError("GET failed", url="http://ledger", status_code=503),
        ConnectionResetError("reset by peer"),
        asyncio.TimeoutError(),
    ],
)
async def test_fetch_wraps_transport_errors_once_without_retry(wallet: str, error: Exception) -> None:
    ledger: Any = SimpleNamespace(get_donation_history=AsyncMock(side_effect=error))

    with pytest.raises(FetchError) as exc_info:
        await _fetcher(ledger).fetch(wallet)

    assert ledger.get_donation_history.await_count == 1
    assert exc_info.value.address == wallet
    assert exc_info.value.cause is error


async def test_fetch_wraps_unexpected_ledger_errors(wallet: str) -> None:
    error = RuntimeError("boom")
    ledger: Any = SimpleNamespace(get_donation_history=AsyncMock(side_effect=error))

    with pytest.raises(FetchError) as exc_info:
        await _fetcher(ledger).fetch(wallet)

    assert exc_info.value.cause is error
    assert exc_info.value.address == wallet


async def test_fetch_lets_cancellation_through(wallet: str) -> None:
    ledger: Any = SimpleNamespace(
        get_donation_history=AsyncMock(side_effect=asyncio.CancelledError())
    )
    with pytest.raises(asyncio.CancelledError):
        await _fetcher(ledger).fetch(wallet)


async def test_fetch_rejects_non_list_response(wallet: str) -> None:
    ledger: Any = SimpleNamespace(get_donation_history=AsyncMock(return_value={"error": "x"}))
    with pytest.raises(FetchError):
        await _fetcher(ledger).fetch(wallet)


@pytest.mark.parametrize("missing", ["id", "project_id", "amount"])
async def test_fetch_rejects_item_missing_required_field(
    wallet: str, receipt_factory: Callable[..., dict[str, Any]], missing: str
) -> None:
    item = receipt_factory()
    del item[missing]
    ledger: Any = SimpleNamespace(get_donation_history=AsyncMock(return_value=[item]))

    with pytest.raises(FetchError) as exc_info:
        await _fetcher(ledger).fetch(wallet)

    assert missing in str(exc_info.value)
    assert exc_info.value.address == wallet


async def test_fetch_rejects_numeric_amount_instead_of_string(
    wallet: str, receipt_factory: Callable[..., dict[str, Any]]
) -> None:
    ledger: Any = SimpleNamespace(
        get_donation_history=AsyncMock(return_value=[receipt_factory(amount=1000)])
    )
    with pytest.raises(FetchError):
        await _fetcher(ledger).fetch(wallet)


async def test_fetch_leaves_amount_validation_to_normalizer(
    wallet: str, receipt_factory: Callable[..., dict[str, Any]]
) -> None:
    ledger: Any = SimpleNamespace(
        get_donation_history=AsyncMock(return_value=[receipt_factory(amount="not-a-number")])
    )
    records = await _fetcher(ledger).fetch(wallet)
    assert records[0].raw_amount == "not-a-number"


def test_record_from_response_rejects_non_object() -> None:
    with pytest.raises(FetchError):
        record_from_response(["0xc1"], 0)


def test_record_from_response_donor_is_optional() -> None:
    record = record_from_response({"id": "0xc1", "project_id": "0xp", "amount": "5"}, 0)
    assert record.donor is None
