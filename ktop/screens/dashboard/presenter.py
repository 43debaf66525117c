"""Dashboard presenter - turns a snapshot and view state into rows and text.

Nothing here touches widgets, so every method can be exercised without a
running app.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rich.text import Text

from ktop.constants.limits import (
    NAMESPACE_COLUMN_MAX,
    NODE_NAME_COLUMN_MAX,
    POD_NAME_COLUMN_MAX,
    RESTARTS_CRITICAL,
    RESTARTS_WARNING,
)
from ktop.constants.values import APP_SUBTITLE, APP_TITLE
from ktop.models.core.cluster_metrics import ClusterMetrics
from ktop.models.core.node_info import NodeInfo
from ktop.models.core.pod_info import PodInfo
from ktop.models.state.app_state import AppState
from ktop.screens.dashboard.config import (
    ACCELERATOR_STYLE,
    CRITICAL_STYLE,
    DIM_STYLE,
    HEADER_STYLE,
    HEALTHY_STYLE,
    NODE_STATUS_STYLES,
    POD_STATUS_STYLES,
    SYSTEM_NAMESPACE_STYLE,
    WARNING_STYLE,
    WORKLOAD_COUNT_STYLE,
)
from ktop.utils.formatting import (
    format_age,
    format_cpu,
    format_memory,
    format_percent,
    truncate,
)
from ktop.utils.query import (
    filter_pods,
    is_system_namespace,
    limit_pods,
    sort_nodes,
    sort_pods,
)


def sort_arrow(ascending: bool) -> str:
    return "↑" if ascending else "↓"


class DashboardPresenter:
    """Formats snapshot data for the dashboard widgets."""

    def __init__(
        self,
        warning_percent: float = 50.0,
        critical_percent: float = 80.0,
        top_pods: int = 30,
    ) -> None:
        self.warning_percent = warning_percent
        self.critical_percent = critical_percent
        self.top_pods = top_pods

    def usage_style(self, percent: float) -> str:
        if percent >= self.critical_percent:
            return CRITICAL_STYLE
        if percent >= self.warning_percent:
            return WARNING_STYLE
        return HEALTHY_STYLE

    @staticmethod
    def restart_style(restarts: int) -> str:
        if restarts > RESTARTS_CRITICAL:
            return CRITICAL_STYLE
        if restarts > RESTARTS_WARNING:
            return WARNING_STYLE
        return ""

    # -------------------------------------------------------------------------
    # Header and summary
    # -------------------------------------------------------------------------

    def header_text(
        self,
        metrics: ClusterMetrics | None,
        last_error: str | None = None,
        now: datetime | None = None,
    ) -> Text:
        """Title line: cluster, context, ready nodes, snapshot age and warnings."""
        text = Text()
        text.append(APP_TITLE, style=HEADER_STYLE)
        if metrics is None:
            text.append(f" - {APP_SUBTITLE}   ")
            text.append(last_error or "Connecting...", style=CRITICAL_STYLE)
            return text

        now = now or datetime.now(timezone.utc)
        totals = metrics.totals
        text.append(" - ")
        text.append(metrics.cluster.name, style="bold")
        text.append(f" ({metrics.cluster.context})", style=DIM_STYLE)
        text.append("   Nodes: ")
        text.append(f"{totals.ready_node_count}/{totals.node_count}", style="bold")
        text.append(f"   Updated: {format_age(now - metrics.timestamp)} ago", style=DIM_STYLE)
        if metrics.error:
            text.append(f"  ⚠ {metrics.error}", style=WARNING_STYLE)
        if last_error:
            text.append(f"  ✖ {last_error}", style=CRITICAL_STYLE)
        return text

    def _usage_segment(self, text: Text, label: str, used: str, capacity: str, percent: float) -> None:
        style = self.usage_style(percent)
        if label:
            text.append(f"{label}  ", style="bold")
        text.append(used, style=style)
        text.append(f" / {capacity}  ")
        text.append(format_percent(percent), style=style)
        text.append("   ")

    def summary_text(self, metrics: ClusterMetrics | None) -> Text:
        """Cluster resource totals: CPU, RAM, optional disk and accelerators, workloads."""
        if metrics is None:
            return Text("Loading cluster resources...", style=DIM_STYLE)

        totals = metrics.totals
        text = Text()
        text.append("CPU: ", style="bold")
        text.append(f"{totals.cpu_core_count} cores ", style=DIM_STYLE)
        self._usage_segment(
            text,
            "",
            format_cpu(totals.cpu_used),
            format_cpu(totals.cpu_capacity),
            totals.cpu_percent,
        )
        self._usage_segment(
            text,
            "RAM:",
            format_memory(totals.memory_used),
            format_memory(totals.memory_capacity),
            totals.memory_percent,
        )
        if totals.disk_capacity > 0:
            self._usage_segment(
                text,
                "DISK:",
                format_memory(totals.disk_used),
                format_memory(totals.disk_capacity),
                totals.disk_percent,
            )
        if totals.accelerator_count > 0:
            text.append("GPUs: ", style="bold")
            text.append(str(totals.accelerator_count), style=ACCELERATOR_STYLE)
        text.append("\n")
        text.append("Pods: ", style="bold")
        text.append(str(totals.workload_count), style=WORKLOAD_COUNT_STYLE)
        text.append(" running")
        return text

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    @staticmethod
    def visible_nodes(metrics: ClusterMetrics | None, state: AppState) -> list[NodeInfo]:
        if metrics is None:
            return []
        return sort_nodes(metrics.nodes, state.node_sort_field, state.node_sort_ascending)

    def visible_pods(self, metrics: ClusterMetrics | None, state: AppState) -> list[PodInfo]:
        """Filter, then sort, then keep the top rows."""
        if metrics is None:
            return []
        pods = filter_pods(metrics.pods, state.namespace_filter, state.show_system)
        pods = sort_pods(pods, state.pod_sort_field, state.pod_sort_ascending)
        return limit_pods(pods, self.top_pods)

    @staticmethod
    def nodes_title(state: AppState) -> str:
        return (
            f"NODES (sort: {state.node_sort_field.value} "
            f"{sort_arrow(state.node_sort_ascending)})"
        )

    @staticmethod
    def pods_title(state: AppState, count: int) -> str:
        return (
            f"PODS (top {count} by {state.pod_sort_field.value} "
            f"{sort_arrow(state.pod_sort_ascending)}) "
            f"[filter: {state.namespace_filter or 'all'}]"
        )

    def node_row(self, node: NodeInfo) -> tuple[Text, ...]:
        cpu_style = self.usage_style(node.cpu.percent)
        memory_style = self.usage_style(node.memory.percent)
        accelerator = str(node.accelerator.count) if node.accelerator else "-"
        return (
            Text(truncate(node.name, NODE_NAME_COLUMN_MAX)),
            Text(node.status.value, style=NODE_STATUS_STYLES[node.status]),
            Text(format_cpu(node.cpu.current), justify="right"),
            Text(format_percent(node.cpu.percent), style=cpu_style, justify="right"),
            Text(format_memory(node.memory.current), justify="right"),
            Text(format_percent(node.memory.percent), style=memory_style, justify="right"),
            Text(str(node.pod_count), justify="right"),
            Text(accelerator, style=ACCELERATOR_STYLE if node.accelerator else DIM_STYLE, justify="right"),
        )

    def pod_row(self, pod: PodInfo) -> tuple[Text, ...]:
        namespace_style = SYSTEM_NAMESPACE_STYLE if is_system_namespace(pod.namespace) else ""
        return (
            Text(truncate(pod.namespace, NAMESPACE_COLUMN_MAX), style=namespace_style),
            Text(truncate(pod.name, POD_NAME_COLUMN_MAX)),
            Text(pod.status.value, style=POD_STATUS_STYLES[pod.status]),
            Text(format_cpu(pod.cpu), justify="right"),
            Text(format_memory(pod.memory), justify="right"),
            Text(str(pod.restart_count), style=self.restart_style(pod.restart_count), justify="right"),
            Text(truncate(pod.node_name, NODE_NAME_COLUMN_MAX), style=DIM_STYLE),
        )

    def node_rows(self, metrics: ClusterMetrics | None, state: AppState) -> list[tuple[Text, ...]]:
        return [self.node_row(node) for node in self.visible_nodes(metrics, state)]

    def pod_rows(self, metrics: ClusterMetrics | None, state: AppState) -> list[tuple[Text, ...]]:
        return [self.pod_row(pod) for pod in self.visible_pods(metrics, state)]
