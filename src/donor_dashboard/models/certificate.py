"""Donation certificate records: raw (ledger units) and normalized (display units)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class CertificateRecord:
    """One minted donation receipt as returned by the ledger service.

    ``raw_amount`` is kept as the ledger's string; parsing happens in the
    unit normalizer so malformed values are reported there.
    """

    certificate_id: str
    project_id: str
    raw_amount: str
    """Amount in MIST (10^-9 SUI), decimal integer string."""
    donor: str | None = None


@dataclass(frozen=True, slots=True)
class NormalizedRecord:
    """A CertificateRecord with its amount converted to the display unit."""

    record: CertificateRecord
    display_amount: Decimal
    """Exact ``raw_amount / 10^9``; never rounded here."""

    @property
    def certificate_id(self) -> str:
        return self.record.certificate_id

    @property
    def project_id(self) -> str:
        return self.record.project_id

    @property
    def raw_amount(self) -> str:
        return self.record.raw_amount
