"""ViewModel construction."""

from donor_dashboard.services.presentation.presentation_adapter import (
    PresentationAdapter,
    format_amount,
    quantize_amount,
)

__all__ = ["PresentationAdapter", "format_amount", "quantize_amount"]
