"""Tests for machine-readable export documents."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from ktop.constants.enums import NodeStatus, PodStatus
from ktop.models.core.cluster_metrics import ClusterIdentity, ClusterMetrics, ClusterTotals
from ktop.models.core.node_info import AcceleratorInfo, NodeInfo, ResourceUsage
from ktop.models.core.pod_info import PodInfo
from ktop.utils.export import build_export, node_document, pod_document, render_export


@pytest.fixture
def metrics() -> ClusterMetrics:
    node = NodeInfo(
        name="node-1",
        status=NodeStatus.READY,
        cpu=ResourceUsage.from_values(1000, 4000),
        memory=ResourceUsage.from_values(2048, 8192),
        disk=ResourceUsage.from_values(0, 100),
        accelerator=AcceleratorInfo(count=2, memory_total=1024),
        pod_count=1,
        labels={"role": "worker"},
    )
    pod = PodInfo(
        namespace="default",
        name="web",
        node_name="node-1",
        status=PodStatus.RUNNING,
        cpu=250,
        memory=1024,
        container_count=2,
        restart_count=3,
    )
    return ClusterMetrics(
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        cluster=ClusterIdentity(name="prod", context="prod-admin"),
        nodes=(node,),
        pods=(pod,),
        totals=ClusterTotals(
            cpu_capacity=4000,
            cpu_used=1000,
            cpu_core_count=4,
            memory_capacity=8192,
            memory_used=2048,
            disk_capacity=0,
            accelerator_count=2,
            workload_count=1,
            node_count=1,
            ready_node_count=1,
        ),
    )


@pytest.mark.unit
@pytest.mark.fast
class TestExportDocuments:
    """Tests for export document shapes."""

    def test_resources_keys_and_order(self, metrics: ClusterMetrics) -> None:
        document = build_export(metrics, "resources")
        assert list(document) == [
            "cluster",
            "context",
            "cpuCores",
            "cpuUsed",
            "cpuCapacity",
            "cpuPercent",
            "memoryUsed",
            "memoryCapacity",
            "memoryPercent",
            "diskUsed",
            "diskCapacity",
            "diskPercent",
            "gpus",
            "pods",
            "nodes",
            "readyNodes",
        ]
        assert document["cluster"] == "prod"
        assert document["cpuPercent"] == 25.0
        assert document["memoryPercent"] == 25.0
        assert document["diskPercent"] == 0.0

    def test_node_document(self, metrics: ClusterMetrics) -> None:
        document = node_document(metrics.nodes[0])
        assert document["Name"] == "node-1"
        assert document["Status"] == "Ready"
        assert document["CPU"] == {"Current": 1000, "Capacity": 4000, "Percent": 25.0}
        assert document["GPU"] == {
            "Count": 2,
            "MemoryUsed": 0,
            "MemoryTotal": 1024,
            "Utilization": 0.0,
        }
        assert document["Conditions"] == {
            "MemoryPressure": False,
            "DiskPressure": False,
            "PIDPressure": False,
            "NetworkUnavail": False,
        }
        assert document["Labels"] == {"role": "worker"}

    def test_node_without_accelerator_has_null_gpu(self) -> None:
        assert node_document(NodeInfo(name="cpu-only"))["GPU"] is None

    def test_pod_document(self, metrics: ClusterMetrics) -> None:
        assert pod_document(metrics.pods[0]) == {
            "Namespace": "default",
            "Name": "web",
            "NodeName": "node-1",
            "Status": "Running",
            "CPU": 250,
            "Memory": 1024,
            "ContainerCount": 2,
            "RestartCount": 3,
        }

    def test_unknown_resource_raises(self, metrics: ClusterMetrics) -> None:
        with pytest.raises(ValueError):
            build_export(metrics, "events")

    @pytest.mark.parametrize("resource", ["resources", "pods", "nodes"])
    def test_render_is_indented_json_with_newline(self, metrics: ClusterMetrics, resource: str) -> None:
        output = render_export(metrics, resource)
        assert output.endswith("}\n") or output.endswith("]\n")
        assert output.splitlines()[1].startswith("  ")
        assert json.loads(output) == build_export(metrics, resource)

    def test_render_keeps_float_percentages(self, metrics: ClusterMetrics) -> None:
        output = render_export(metrics, "resources")
        assert '"cpuPercent": 25.0,' in output
        assert '"diskPercent": 0.0,' in output

    def test_render_node_without_labels(self) -> None:
        output = render_export(
            ClusterMetrics(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), nodes=(NodeInfo(name="bare"),)),
            "nodes",
        )
        assert '"Labels": {}' in output
        assert '"GPU": null' in output
