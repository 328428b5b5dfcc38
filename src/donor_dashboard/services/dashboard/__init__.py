# -*- coding: utf-8 -*-
"""Dashboard cycle orchestration."""

from donor_dashboard.services.dashboard.dashboard_service import DashboardService
from donor_dashboard.services.dashboard.identity_watcher import IdentityWatcher
from donor_dashboard.services.dashboard.view_logger import DashboardViewLogger

__all__ = ["DashboardService", "DashboardViewLogger", "IdentityWatcher"]
