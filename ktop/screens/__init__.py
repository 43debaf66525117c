"""Screens for ktop."""

from ktop.screens.dashboard import DashboardPresenter, DashboardScreen, HelpScreen

__all__ = ["DashboardPresenter", "DashboardScreen", "HelpScreen"]
