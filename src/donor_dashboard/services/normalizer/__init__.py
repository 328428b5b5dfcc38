"""MIST to SUI normalization."""

from donor_dashboard.services.normalizer.unit_normalizer import (
    MIST_DECIMALS,
    MIST_PER_SUI,
    NormalizationResult,
    normalize,
    normalize_all,
    parse_raw_amount,
    to_display_amount,
)

__all__ = [
    "MIST_DECIMALS",
    "MIST_PER_SUI",
    "NormalizationResult",
    "normalize",
    "normalize_all",
    "parse_raw_amount",
    "to_display_amount",
]
