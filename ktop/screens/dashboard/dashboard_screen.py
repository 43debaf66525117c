"""Dashboard screen - live cluster summary with node and pod tables."""

from __future__ import annotations

import logging
from contextlib import suppress

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.screen import ModalScreen, Screen
from textual.widgets import DataTable, Footer, Static

from ktop.constants.enums import ViewMode
from ktop.controllers.metrics import MetricsCollector, PollingScheduler
from ktop.keyboard import DASHBOARD_SCREEN_BINDINGS, HELP_SCREEN_BINDINGS
from ktop.models.core.cluster_metrics import ClusterMetrics
from ktop.models.state.app_settings import AppSettings
from ktop.models.state.app_state import AppState
from ktop.screens.dashboard.config import (
    HEADER_ID,
    HELP_TEXT,
    NODE_TABLE_COLUMNS,
    NODES_TABLE_ID,
    POD_TABLE_COLUMNS,
    PODS_TABLE_ID,
    SUMMARY_ID,
)
from ktop.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


class HelpScreen(ModalScreen[None]):
    """Modal listing the keyboard controls."""

    BINDINGS: list[Binding] = HELP_SCREEN_BINDINGS

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-panel {
        width: auto;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(HELP_TEXT, id="help-panel", markup=False)

    def action_close(self) -> None:
        self.dismiss(None)


class DashboardScreen(Screen[None]):
    """Header, summary, nodes table and pods table, redrawn on a timer.

    The polling scheduler runs as a worker of this screen. Redraws read the
    collector's snapshot store on their own cadence and after every completed
    cycle.
    """

    BINDINGS: list[Binding] = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    #dashboard-header {
        height: 1;
        padding: 0 1;
    }

    #dashboard-summary {
        height: 2;
        padding: 0 1;
    }

    DataTable {
        height: 1fr;
        border: round $primary-darken-2;
    }

    DataTable:focus {
        border: round $accent;
    }
    """

    def __init__(self, collector: MetricsCollector, settings: AppSettings) -> None:
        super().__init__()
        self._collector = collector
        self._settings = settings
        self.state = AppState(show_system=settings.all_namespaces)
        self._presenter = DashboardPresenter(
            warning_percent=settings.warning_percent,
            critical_percent=settings.critical_percent,
            top_pods=settings.top_pods,
        )
        self.scheduler = PollingScheduler(
            collector,
            interval=settings.refresh_interval,
            on_snapshot=self._on_snapshot,
        )

    def compose(self) -> ComposeResult:
        yield Static(id=HEADER_ID)
        yield Static(id=SUMMARY_ID)
        yield DataTable(id=NODES_TABLE_ID, cursor_type="row", zebra_stripes=True)
        yield DataTable(id=PODS_TABLE_ID, cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        for table_id, columns in (
            (NODES_TABLE_ID, NODE_TABLE_COLUMNS),
            (PODS_TABLE_ID, POD_TABLE_COLUMNS),
        ):
            table = self.query_one(f"#{table_id}", DataTable)
            for name, width in columns:
                table.add_column(name, width=width, key=name)
        self.query_one(f"#{PODS_TABLE_ID}", DataTable).focus()

        self.redraw()
        self.set_interval(self._settings.redraw_interval, self.redraw)
        self.run_worker(
            self.scheduler.run(),
            name="metrics-poller",
            group="metrics",
            exclusive=True,
        )

    def on_unmount(self) -> None:
        """Stop polling and cancel the poller worker."""
        self.scheduler.stop()
        with suppress(Exception):
            self.workers.cancel_all()

    def _on_snapshot(self, _metrics: ClusterMetrics) -> None:
        self.redraw()

    # =========================================================================
    # Rendering
    # =========================================================================

    @staticmethod
    def _fill_table(table: DataTable, rows: list[tuple[Text, ...]]) -> None:
        """Replace all rows, keeping the cursor on the same row index."""
        cursor_row = table.cursor_row
        table.clear()
        table.add_rows(rows)
        if rows:
            table.move_cursor(row=min(cursor_row, len(rows) - 1), animate=False)

    def redraw(self) -> None:
        """Render the current snapshot with the current view state."""
        metrics = self._collector.get_last_metrics()
        try:
            header = self.query_one(f"#{HEADER_ID}", Static)
            summary = self.query_one(f"#{SUMMARY_ID}", Static)
            nodes_table = self.query_one(f"#{NODES_TABLE_ID}", DataTable)
            pods_table = self.query_one(f"#{PODS_TABLE_ID}", DataTable)
        except NoMatches:
            return

        header.update(self._presenter.header_text(metrics, self.scheduler.last_error))
        summary.update(self._presenter.summary_text(metrics))

        nodes_table.display = self.state.view_mode != ViewMode.PODS
        pods_table.display = self.state.view_mode != ViewMode.NODES

        self._fill_table(nodes_table, self._presenter.node_rows(metrics, self.state))
        nodes_table.border_title = self._presenter.nodes_title(self.state)

        pod_rows = self._presenter.pod_rows(metrics, self.state)
        self._fill_table(pods_table, pod_rows)
        pods_table.border_title = self._presenter.pods_title(self.state, len(pod_rows))

    def _update_state(self, state: AppState) -> None:
        self.state = state
        self.redraw()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        if not self.scheduler.request_refresh():
            logger.debug("Refresh already pending")

    def action_cycle_node_sort(self) -> None:
        self._update_state(self.state.next_node_sort())

    def action_cycle_pod_sort(self) -> None:
        self._update_state(self.state.next_pod_sort())

    def action_cycle_namespace(self) -> None:
        self._update_state(self.state.next_namespace(self._collector.get_namespaces()))

    def action_clear_namespace(self) -> None:
        self._update_state(self.state.clear_namespace())

    def action_cycle_view(self) -> None:
        self._update_state(self.state.next_view_mode())
        self._focus_visible_table()

    def action_toggle_system(self) -> None:
        self._update_state(self.state.toggle_system())

    def action_switch_table(self) -> None:
        """Move focus to the other table when both are shown."""
        nodes_table = self.query_one(f"#{NODES_TABLE_ID}", DataTable)
        pods_table = self.query_one(f"#{PODS_TABLE_ID}", DataTable)
        if self.state.view_mode != ViewMode.SPLIT:
            self._focus_visible_table()
            return
        if pods_table.has_focus:
            nodes_table.focus()
        else:
            pods_table.focus()

    def _focus_visible_table(self) -> None:
        table_id = NODES_TABLE_ID if self.state.view_mode == ViewMode.NODES else PODS_TABLE_ID
        self.query_one(f"#{table_id}", DataTable).focus()
