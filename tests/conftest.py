# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from donor_dashboard.config import Settings
from donor_dashboard.models.certificate import CertificateRecord, NormalizedRecord
from donor_dashboard.services.normalizer import normalize


@pytest.fixture
def wallet() -> str:
    """Default connected donor address used by tests."""
    return "0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e"


@pytest.fixture
def project_id() -> str:
    """Default funded project object id."""
    return "0x5b1e8d3f0a2c4e6f8a1b3c5d7e9f0a2b4c6d8e0f1a3b5c7d9e1f3a5b7c9d1e3f"


@pytest.fixture
def D() -> Callable[[Any], Decimal]:
    """Decimal helper: D('1.23') -> Decimal('1.23')."""
    return lambda value: Decimal(str(value))


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with nested overrides, e.g. dashboard={"malformed_amount_policy": "skip"}."""

    def _build(**overrides: Any) -> Settings:
        return Settings.from_env(**overrides)

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def receipt_factory(project_id: str, wallet: str) -> Callable[..., dict[str, Any]]:
    """Build a raw ledger receipt item ({id, project_id, donor, amount})."""

    def _build(id: str = "0xc1", amount: str = "1000000000", **overrides: Any) -> dict[str, Any]:
        item: dict[str, Any] = {
            "id": id,
            "project_id": project_id,
            "donor": wallet,
            "amount": amount,
        }
        item.update(overrides)
        return item

    return _build


@pytest.fixture
def record_factory(project_id: str) -> Callable[..., CertificateRecord]:
    """Build CertificateRecord with sensible defaults."""

    def _build(
        certificate_id: str = "0xc1",
        raw_amount: str = "1000000000",
        **overrides: Any,
    ) -> CertificateRecord:
        return CertificateRecord(
            certificate_id=certificate_id,
            project_id=overrides.pop("project_id", project_id),
            raw_amount=raw_amount,
            donor=overrides.pop("donor", None),
        )

    return _build


@pytest.fixture
def normalized_factory(
    record_factory: Callable[..., CertificateRecord],
) -> Callable[..., NormalizedRecord]:
    """Build NormalizedRecord from raw MIST amount."""

    def _build(certificate_id: str = "0xc1", raw_amount: str = "1000000000", **overrides: Any) -> NormalizedRecord:
        return normalize(record_factory(certificate_id, raw_amount, **overrides))

    return _build
