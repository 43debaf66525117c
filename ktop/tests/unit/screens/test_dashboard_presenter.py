"""Tests for DashboardPresenter formatting and row selection."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from ktop.constants.enums import NodeSortField, NodeStatus, PodSortField, PodStatus
from ktop.models.core.cluster_metrics import ClusterIdentity, ClusterMetrics, ClusterTotals
from ktop.models.core.node_info import AcceleratorInfo, NodeInfo, ResourceUsage
from ktop.models.core.pod_info import PodInfo
from ktop.models.state.app_state import AppState
from ktop.screens.dashboard.config import (
    CRITICAL_STYLE,
    HEALTHY_STYLE,
    NODE_TABLE_COLUMNS,
    POD_TABLE_COLUMNS,
    WARNING_STYLE,
)
from ktop.screens.dashboard.presenter import DashboardPresenter, sort_arrow

_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _pod(namespace: str, name: str, cpu: int = 0, memory: int = 0, restarts: int = 0) -> PodInfo:
    return PodInfo(
        namespace=namespace,
        name=name,
        node_name="node-a",
        status=PodStatus.RUNNING,
        cpu=cpu,
        memory=memory,
        restart_count=restarts,
    )


@pytest.fixture
def metrics() -> ClusterMetrics:
    nodes = (
        NodeInfo(
            name="node-a",
            status=NodeStatus.READY,
            cpu=ResourceUsage.from_values(3000, 4000),
            memory=ResourceUsage.from_values(1024, 4096),
            pod_count=3,
        ),
        NodeInfo(
            name="node-b",
            status=NodeStatus.NOT_READY,
            cpu=ResourceUsage.from_values(500, 4000),
            memory=ResourceUsage.from_values(2048, 4096),
            accelerator=AcceleratorInfo(count=4),
        ),
    )
    pods = (
        _pod("default", "web", cpu=200, memory=100),
        _pod("default", "worker", cpu=900, memory=50, restarts=7),
        _pod("kube-system", "coredns", cpu=50, memory=10),
    )
    return ClusterMetrics(
        timestamp=_NOW - timedelta(seconds=5),
        cluster=ClusterIdentity(name="prod", context="prod-admin"),
        nodes=nodes,
        pods=pods,
        totals=ClusterTotals(
            cpu_capacity=8000,
            cpu_used=3500,
            cpu_core_count=8,
            memory_capacity=8192,
            memory_used=3072,
            accelerator_count=4,
            workload_count=3,
            node_count=2,
            ready_node_count=1,
        ),
    )


@pytest.mark.unit
@pytest.mark.fast
class TestPresenterStyles:
    """Tests for threshold styling."""

    @pytest.mark.parametrize(
        ("percent", "style"),
        [(10.0, HEALTHY_STYLE), (50.0, WARNING_STYLE), (79.9, WARNING_STYLE), (80.0, CRITICAL_STYLE)],
    )
    def test_usage_style(self, percent: float, style: str) -> None:
        assert DashboardPresenter().usage_style(percent) == style

    def test_custom_thresholds(self) -> None:
        presenter = DashboardPresenter(warning_percent=20, critical_percent=30)
        assert presenter.usage_style(25.0) == WARNING_STYLE
        assert presenter.usage_style(30.0) == CRITICAL_STYLE

    @pytest.mark.parametrize(("restarts", "style"), [(0, ""), (1, WARNING_STYLE), (6, CRITICAL_STYLE)])
    def test_restart_style(self, restarts: int, style: str) -> None:
        assert DashboardPresenter.restart_style(restarts) == style

    def test_sort_arrow(self) -> None:
        assert sort_arrow(True) == "↑"
        assert sort_arrow(False) == "↓"


@pytest.mark.unit
@pytest.mark.fast
class TestPresenterText:
    """Tests for the header and summary lines."""

    def test_header_before_first_snapshot(self) -> None:
        assert "Connecting..." in DashboardPresenter().header_text(None).plain

    def test_header_shows_last_error_before_first_snapshot(self) -> None:
        text = DashboardPresenter().header_text(None, last_error="node descriptors: boom")
        assert "node descriptors: boom" in text.plain

    def test_header_with_snapshot(self, metrics: ClusterMetrics) -> None:
        plain = DashboardPresenter().header_text(metrics, now=_NOW).plain
        assert "prod" in plain
        assert "(prod-admin)" in plain
        assert "Nodes: 1/2" in plain
        assert "Updated: 5s ago" in plain

    def test_header_shows_partial_warning(self, metrics: ClusterMetrics) -> None:
        degraded = metrics.model_copy(update={"error": "node usage: forbidden"})
        plain = DashboardPresenter().header_text(degraded, now=_NOW).plain
        assert "node usage: forbidden" in plain

    def test_summary_before_first_snapshot(self) -> None:
        assert DashboardPresenter().summary_text(None).plain == "Loading cluster resources..."

    def test_summary_with_snapshot(self, metrics: ClusterMetrics) -> None:
        plain = DashboardPresenter().summary_text(metrics).plain
        assert "8 cores" in plain
        assert "3.5 / 8.0" in plain
        assert "43.8%" in plain
        assert "RAM:" in plain
        assert "GPUs: 4" in plain
        assert "DISK:" not in plain
        assert plain.endswith("Pods: 3 running")


@pytest.mark.unit
@pytest.mark.fast
class TestPresenterRows:
    """Tests for visible rows and table titles."""

    def test_no_rows_without_snapshot(self) -> None:
        presenter = DashboardPresenter()
        assert presenter.node_rows(None, AppState()) == []
        assert presenter.pod_rows(None, AppState()) == []

    def test_nodes_sorted_by_cpu_descending(self, metrics: ClusterMetrics) -> None:
        nodes = DashboardPresenter.visible_nodes(metrics, AppState())
        assert [node.name for node in nodes] == ["node-a", "node-b"]

    def test_nodes_sorted_by_memory(self, metrics: ClusterMetrics) -> None:
        state = AppState(node_sort_field=NodeSortField.MEMORY)
        nodes = DashboardPresenter.visible_nodes(metrics, state)
        assert [node.name for node in nodes] == ["node-b", "node-a"]

    def test_system_pods_hidden_by_default(self, metrics: ClusterMetrics) -> None:
        pods = DashboardPresenter().visible_pods(metrics, AppState())
        assert [pod.name for pod in pods] == ["worker", "web"]

    def test_system_pods_shown_when_toggled(self, metrics: ClusterMetrics) -> None:
        pods = DashboardPresenter().visible_pods(metrics, AppState(show_system=True))
        assert [pod.name for pod in pods] == ["worker", "web", "coredns"]

    def test_pods_limited_after_sort(self, metrics: ClusterMetrics) -> None:
        state = AppState(pod_sort_field=PodSortField.MEMORY)
        pods = DashboardPresenter(top_pods=1).visible_pods(metrics, state)
        assert [pod.name for pod in pods] == ["web"]

    def test_node_row_cells(self, metrics: ClusterMetrics) -> None:
        presenter = DashboardPresenter()
        row = presenter.node_row(metrics.nodes[1])
        assert len(row) == len(NODE_TABLE_COLUMNS)
        assert [cell.plain for cell in row] == [
            "node-b",
            "NotReady",
            "500m",
            "12.5%",
            "2Ki",
            "50.0%",
            "0",
            "4",
        ]

    def test_node_row_without_accelerator(self, metrics: ClusterMetrics) -> None:
        row = DashboardPresenter().node_row(metrics.nodes[0])
        assert row[-1].plain == "-"
        assert row[3].style == WARNING_STYLE

    def test_pod_row_cells(self, metrics: ClusterMetrics) -> None:
        row = DashboardPresenter().pod_row(metrics.pods[1])
        assert len(row) == len(POD_TABLE_COLUMNS)
        assert [cell.plain for cell in row] == [
            "default",
            "worker",
            "Running",
            "900m",
            "50B",
            "7",
            "node-a",
        ]
        assert row[5].style == CRITICAL_STYLE

    def test_titles(self) -> None:
        state = AppState(namespace_filter="default", pod_sort_ascending=True)
        assert DashboardPresenter.nodes_title(state) == "NODES (sort: CPU ↓)"
        assert DashboardPresenter.pods_title(state, 12) == "PODS (top 12 by CPU ↑) [filter: default]"
        assert DashboardPresenter.pods_title(AppState(), 0).endswith("[filter: all]")
