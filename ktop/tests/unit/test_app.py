"""Unit tests for KtopApp - class attributes and constructor handling.

Tests avoid running the Textual event loop to stay fast and deterministic.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from textual.app import App
from textual.binding import Binding

from ktop.app import KtopApp
from ktop.constants import APP_TITLE
from ktop.keyboard import APP_BINDINGS, DASHBOARD_SCREEN_BINDINGS, HELP_SCREEN_BINDINGS
from ktop.models.state.app_settings import AppSettings
from ktop.screens import DashboardScreen, HelpScreen


class TestAppClassAttributes:
    """Test KtopApp class-level attributes."""

    def test_app_title_set(self) -> None:
        assert KtopApp.TITLE == APP_TITLE

    def test_app_bindings_match_app_bindings_constant(self) -> None:
        assert KtopApp.BINDINGS is APP_BINDINGS

    def test_app_inherits_from_textual_app(self) -> None:
        assert issubclass(KtopApp, App)


class TestAppInstantiation:
    """Test KtopApp constructor."""

    def test_default_settings(self) -> None:
        app = KtopApp(MagicMock())
        assert isinstance(app.settings, AppSettings)
        assert app.settings.top_pods == 30

    def test_explicit_settings(self) -> None:
        settings = AppSettings(top_pods=5)
        collector = MagicMock()
        app = KtopApp(collector, settings)
        assert app.settings is settings
        assert app.collector is collector


class TestKeyBindings:
    """Test binding tables wired to the app and screens."""

    @staticmethod
    def _keys(bindings: list[Binding]) -> dict[str, str]:
        return {binding.key: binding.action for binding in bindings}

    def test_all_bindings_are_binding_objects(self) -> None:
        for binding in APP_BINDINGS + DASHBOARD_SCREEN_BINDINGS + HELP_SCREEN_BINDINGS:
            assert isinstance(binding, Binding)

    def test_app_keys(self) -> None:
        keys = self._keys(APP_BINDINGS)
        assert keys["q"] == "app.quit"
        assert keys["?"] == "show_help"

    def test_dashboard_keys(self) -> None:
        keys = self._keys(DASHBOARD_SCREEN_BINDINGS)
        assert keys["r"] == "refresh"
        assert keys["s"] == "cycle_node_sort"
        assert keys["p"] == "cycle_pod_sort"
        assert keys["f"] == keys["n"] == "cycle_namespace"
        assert keys["escape"] == "clear_namespace"
        assert keys["t"] == "cycle_view"
        assert keys["a"] == "toggle_system"

    def test_dashboard_actions_exist(self) -> None:
        for binding in DASHBOARD_SCREEN_BINDINGS:
            assert callable(getattr(DashboardScreen, f"action_{binding.action}", None))

    def test_help_actions_exist(self) -> None:
        for binding in HELP_SCREEN_BINDINGS:
            assert callable(getattr(HelpScreen, f"action_{binding.action}", None))
        assert DashboardScreen.BINDINGS is DASHBOARD_SCREEN_BINDINGS
