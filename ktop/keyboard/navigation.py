"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Dashboard screen
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("s", "cycle_node_sort", "Sort nodes"),
    Binding("p", "cycle_pod_sort", "Sort pods"),
    Binding("f", "cycle_namespace", "Namespace"),
    Binding("n", "cycle_namespace", "Namespace", show=False),
    Binding("escape", "clear_namespace", "Clear filter", show=False),
    Binding("t", "cycle_view", "View"),
    Binding("a", "toggle_system", "All ns"),
    Binding("tab", "switch_table", "Switch table", show=False, priority=True),
]

# ============================================================================
# Help modal
# ============================================================================

HELP_SCREEN_BINDINGS: list[Binding] = [
    Binding("escape", "close", "Close"),
    Binding("question_mark", "close", "Close", show=False),
    Binding("enter", "close", "Close", show=False),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
    "HELP_SCREEN_BINDINGS",
]
