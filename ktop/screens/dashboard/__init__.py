"""Dashboard screen module."""

from ktop.screens.dashboard.dashboard_screen import DashboardScreen, HelpScreen
from ktop.screens.dashboard.presenter import DashboardPresenter

__all__ = ["DashboardPresenter", "DashboardScreen", "HelpScreen"]
