"""Main application class for ktop."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from ktop.constants import APP_SUBTITLE, APP_TITLE
from ktop.controllers.metrics import MetricsCollector
from ktop.keyboard.app import APP_BINDINGS
from ktop.models.state.app_settings import AppSettings
from ktop.screens import DashboardScreen, HelpScreen


class KtopApp(App[None]):
    """Main TUI application for ktop."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        collector: MetricsCollector,
        settings: AppSettings | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.collector = collector
        self.settings = settings or AppSettings()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        cluster = self.collector.cluster
        if cluster.name:
            self.sub_title = f"{cluster.name} ({cluster.context})"
        self.push_screen(DashboardScreen(self.collector, self.settings))

    def action_show_help(self) -> None:
        if not isinstance(self.screen, HelpScreen):
            self.push_screen(HelpScreen())
