"""Dependency injection."""

from donor_dashboard.DI.container import Container

__all__ = ["Container"]
