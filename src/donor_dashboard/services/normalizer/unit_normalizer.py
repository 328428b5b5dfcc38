"""Unit normalizer: ledger integer amounts (MIST) to the display unit (SUI).

Uses exact Decimal scaling so amounts well past 10^18 MIST convert without
drift. Rounding is left to presentation.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import structlog

from donor_dashboard.config import MalformedAmountPolicy
from donor_dashboard.exceptions import MalformedAmountError
from donor_dashboard.models.certificate import CertificateRecord, NormalizedRecord

MIST_DECIMALS = 9
MIST_PER_SUI = 10**MIST_DECIMALS

_UNSIGNED_INT = re.compile(r"[0-9]+")


def parse_raw_amount(record: CertificateRecord) -> int:
    """Parse ``record.raw_amount`` as a non-negative integer.

    Raises:
        MalformedAmountError: For anything other than ASCII digits (after
            stripping whitespace): signs, decimals, exponents, empty strings.
    """
    raw = record.raw_amount
    if not isinstance(raw, str):
        raise MalformedAmountError(record.certificate_id, raw)
    text = raw.strip()
    if not _UNSIGNED_INT.fullmatch(text):
        raise MalformedAmountError(record.certificate_id, raw)
    return int(text)


def to_display_amount(raw: int) -> Decimal:
    """Exact ``raw / 10^9``. The Decimal constructor never rounds, whatever the context precision."""
    return Decimal(f"{raw}E-{MIST_DECIMALS}")


def normalize(record: CertificateRecord) -> NormalizedRecord:
    """Convert one record's amount to the display unit."""
    return NormalizedRecord(record=record, display_amount=to_display_amount(parse_raw_amount(record)))


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Normalized records in input order plus the number of records skipped."""

    records: list[NormalizedRecord]
    skipped: int = 0


def normalize_all(
    records: Iterable[CertificateRecord],
    policy: MalformedAmountPolicy = "fail",
    *,
    get_logger: Callable[[str], Any] = structlog.get_logger,
) -> NormalizationResult:
    """Normalize records element-wise, preserving order.

    Args:
        records: Records from the receipt fetcher.
        policy: ``fail`` re-raises the first MalformedAmountError; ``skip``
            drops malformed records and counts them.

    Raises:
        MalformedAmountError: Under ``fail`` when any amount is malformed.
    """
    logger = get_logger("UnitNormalizer")
    normalized: list[NormalizedRecord] = []
    skipped = 0
    for record in records:
        try:
            normalized.append(normalize(record))
        except MalformedAmountError as e:
            if policy == "fail":
                raise
            skipped += 1
            logger.warning(
                "normalizer_malformed_amount_skipped",
                certificate_id=e.certificate_id,
                raw_amount=repr(e.raw_amount),
            )
    return NormalizationResult(records=normalized, skipped=skipped)
