"""Summary aggregation."""

from donor_dashboard.services.aggregation.aggregator import aggregate

__all__ = ["aggregate"]
