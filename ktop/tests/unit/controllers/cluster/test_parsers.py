"""Tests for node, pod and usage parsers."""

from __future__ import annotations

from typing import Any

import pytest

from ktop.controllers.cluster.parsers import NodeParser, PodParser, UsageParser


def _node_item(**status_overrides: Any) -> dict[str, Any]:
    status: dict[str, Any] = {
        "capacity": {
            "cpu": "4",
            "memory": "16Gi",
            "ephemeral-storage": "100Gi",
            "nvidia.com/gpu": "2",
        },
        "allocatable": {"cpu": "3800m", "memory": "15Gi"},
        "conditions": [
            {"type": "MemoryPressure", "status": "False"},
            {"type": "DiskPressure", "status": "True"},
            {"type": "Ready", "status": "True"},
        ],
    }
    status.update(status_overrides)
    return {
        "metadata": {"name": "node-1", "labels": {"nvidia.com/gpu.memory": "16384"}},
        "status": status,
    }


@pytest.mark.unit
@pytest.mark.fast
class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        return NodeParser()

    def test_parse_node(self, parser: NodeParser) -> None:
        node = parser.parse_node(_node_item())

        assert node.name == "node-1"
        assert node.capacity.cpu_milli == 4000
        assert node.capacity.memory_bytes == 16 * 1024**3
        assert node.capacity.ephemeral_storage_bytes == 100 * 1024**3
        assert node.capacity.accelerator_count == 2
        assert node.allocatable.cpu_milli == 3800
        assert node.allocatable.accelerator_count is None
        assert node.labels == {"nvidia.com/gpu.memory": "16384"}

    def test_parse_conditions(self, parser: NodeParser) -> None:
        node = parser.parse_node(_node_item())
        assert [(c.type, c.active) for c in node.conditions] == [
            ("MemoryPressure", False),
            ("DiskPressure", True),
            ("Ready", True),
        ]

    def test_parse_sparse_node(self, parser: NodeParser) -> None:
        """Test a node with missing sections parses to zeros."""
        node = parser.parse_node({"metadata": {"name": "bare"}})
        assert node.name == "bare"
        assert node.capacity.cpu_milli == 0
        assert node.conditions == []
        assert node.labels == {}

    def test_parse_node_list(self, parser: NodeParser) -> None:
        assert len(parser.parse_node_list([_node_item(), _node_item()])) == 2


@pytest.mark.unit
@pytest.mark.fast
class TestPodParser:
    """Tests for PodParser class."""

    def test_parse_pod(self) -> None:
        pod = PodParser().parse_pod(
            {
                "metadata": {"namespace": "default", "name": "web-1"},
                "spec": {
                    "nodeName": "node-1",
                    "containers": [{"name": "app"}, {"name": "sidecar"}],
                },
                "status": {
                    "phase": "Running",
                    "containerStatuses": [
                        {"name": "app", "restartCount": 2},
                        {"name": "sidecar", "restartCount": 1},
                    ],
                },
            }
        )

        assert pod.key == "default/web-1"
        assert pod.node_name == "node-1"
        assert pod.phase == "Running"
        assert pod.containers == ["app", "sidecar"]
        assert pod.restart_counts == [2, 1]

    def test_parse_unscheduled_pod(self) -> None:
        pod = PodParser().parse_pod(
            {
                "metadata": {"namespace": "default", "name": "pending"},
                "spec": {"containers": [{"name": "app"}]},
                "status": {"phase": "Pending"},
            }
        )
        assert pod.node_name == ""
        assert pod.restart_counts == []


@pytest.mark.unit
@pytest.mark.fast
class TestUsageParser:
    """Tests for UsageParser class."""

    def test_parse_node_metrics(self) -> None:
        samples = UsageParser().parse_node_metrics(
            [
                {"metadata": {"name": "node-1"}, "usage": {"cpu": "1500m", "memory": "2Gi"}},
                {"metadata": {}, "usage": {"cpu": "1"}},
            ]
        )
        assert list(samples) == ["node-1"]
        assert samples["node-1"].cpu_milli == 1500
        assert samples["node-1"].memory_bytes == 2 * 1024**3

    def test_parse_pod_metrics_sums_containers(self) -> None:
        samples = UsageParser().parse_pod_metrics(
            [
                {
                    "metadata": {"namespace": "default", "name": "web-1"},
                    "containers": [
                        {"name": "app", "usage": {"cpu": "100m", "memory": "64Mi"}},
                        {"name": "sidecar", "usage": {"cpu": "25000000n", "memory": "16Mi"}},
                    ],
                }
            ]
        )
        assert samples["default/web-1"].cpu_milli == 125
        assert samples["default/web-1"].memory_bytes == 80 * 1024**2
