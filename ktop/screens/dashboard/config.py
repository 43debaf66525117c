"""Dashboard screen configuration - column definitions, colours and widget IDs."""

from __future__ import annotations

from ktop.constants.enums import NodeStatus, PodStatus

# =============================================================================
# Widget IDs
# =============================================================================

HEADER_ID = "dashboard-header"
SUMMARY_ID = "dashboard-summary"
NODES_TABLE_ID = "nodes-table"
PODS_TABLE_ID = "pods-table"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

NODE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("NODE", 22),
    ("STATUS", 10),
    ("CPU", 8),
    ("CPU%", 7),
    ("MEMORY", 9),
    ("MEM%", 7),
    ("PODS", 6),
    ("GPU", 5),
]

POD_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("NAMESPACE", 22),
    ("POD", 42),
    ("STATUS", 10),
    ("CPU", 8),
    ("MEMORY", 9),
    ("RESTARTS", 9),
    ("NODE", 22),
]

# =============================================================================
# Colours
# =============================================================================

HEALTHY_STYLE = "green"
WARNING_STYLE = "yellow"
CRITICAL_STYLE = "red"
DIM_STYLE = "grey50"
HEADER_STYLE = "bold yellow"
SYSTEM_NAMESPACE_STYLE = "dark_cyan"
ACCELERATOR_STYLE = "green"
WORKLOAD_COUNT_STYLE = "cyan"

NODE_STATUS_STYLES: dict[NodeStatus, str] = {
    NodeStatus.READY: HEALTHY_STYLE,
    NodeStatus.NOT_READY: CRITICAL_STYLE,
    NodeStatus.UNKNOWN: WARNING_STYLE,
}

POD_STATUS_STYLES: dict[PodStatus, str] = {
    PodStatus.RUNNING: HEALTHY_STYLE,
    PodStatus.PENDING: WARNING_STYLE,
    PodStatus.SUCCEEDED: "blue",
    PodStatus.FAILED: CRITICAL_STYLE,
    PodStatus.UNKNOWN: DIM_STYLE,
}

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = """\
ktop - Kubernetes Cluster Monitor

Keyboard Controls:
  q       Quit
  r       Force refresh
  s       Sort nodes (cycle)
  p       Sort pods (cycle)
  f / n   Filter by namespace (cycle)
  Esc     Clear namespace filter
  t       Toggle view mode
  a       Toggle system namespaces
  Tab     Switch table focus
  ?       Show this help

Press Esc to close"""
