# -*- coding: utf-8 -*-
"""Utility modules."""

from donor_dashboard.utils.validation import mask_address, truncate_identifier

__all__ = ["mask_address", "truncate_identifier"]
