"""Machine-readable export documents.

Field names and nesting here are a stable external contract; scripts parse
this output. Do not rename keys.
"""

from __future__ import annotations

import json
from typing import Any

from ktop.constants.values import EXPORT_NODES, EXPORT_PODS, EXPORT_RESOURCES
from ktop.models.core.cluster_metrics import ClusterMetrics
from ktop.models.core.node_info import NodeInfo, ResourceUsage
from ktop.models.core.pod_info import PodInfo


def resources_document(metrics: ClusterMetrics) -> dict[str, Any]:
    """Cluster totals and percentages."""
    totals = metrics.totals
    return {
        "cluster": metrics.cluster.name,
        "context": metrics.cluster.context,
        "cpuCores": totals.cpu_core_count,
        "cpuUsed": totals.cpu_used,
        "cpuCapacity": totals.cpu_capacity,
        "cpuPercent": totals.cpu_percent,
        "memoryUsed": totals.memory_used,
        "memoryCapacity": totals.memory_capacity,
        "memoryPercent": totals.memory_percent,
        "diskUsed": totals.disk_used,
        "diskCapacity": totals.disk_capacity,
        "diskPercent": totals.disk_percent,
        "gpus": totals.accelerator_count,
        "pods": totals.workload_count,
        "nodes": totals.node_count,
        "readyNodes": totals.ready_node_count,
    }


def _usage_document(usage: ResourceUsage) -> dict[str, Any]:
    return {
        "Current": usage.current,
        "Capacity": usage.capacity,
        "Percent": usage.percent,
    }


def node_document(node: NodeInfo) -> dict[str, Any]:
    accelerator = None
    if node.accelerator is not None:
        accelerator = {
            "Count": node.accelerator.count,
            "MemoryUsed": node.accelerator.memory_used,
            "MemoryTotal": node.accelerator.memory_total,
            "Utilization": node.accelerator.utilization,
        }
    return {
        "Name": node.name,
        "Status": node.status.value,
        "CPU": _usage_document(node.cpu),
        "Memory": _usage_document(node.memory),
        "Disk": _usage_document(node.disk),
        "GPU": accelerator,
        "PodCount": node.pod_count,
        "Conditions": {
            "MemoryPressure": node.conditions.memory_pressure,
            "DiskPressure": node.conditions.disk_pressure,
            "PIDPressure": node.conditions.pid_pressure,
            "NetworkUnavail": node.conditions.network_unavailable,
        },
        "Labels": dict(node.labels),
    }


def pod_document(pod: PodInfo) -> dict[str, Any]:
    return {
        "Namespace": pod.namespace,
        "Name": pod.name,
        "NodeName": pod.node_name,
        "Status": pod.status.value,
        "CPU": pod.cpu,
        "Memory": pod.memory,
        "ContainerCount": pod.container_count,
        "RestartCount": pod.restart_count,
    }


def build_export(metrics: ClusterMetrics, resource: str) -> Any:
    """Return the export document for *resource* ("resources", "pods" or "nodes").

    Raises:
        ValueError: *resource* is not a known export.
    """
    if resource == EXPORT_RESOURCES:
        return resources_document(metrics)
    if resource == EXPORT_PODS:
        return [pod_document(pod) for pod in metrics.pods]
    if resource == EXPORT_NODES:
        return [node_document(node) for node in metrics.nodes]
    raise ValueError(f"unknown export resource {resource!r}")


def render_export(metrics: ClusterMetrics, resource: str) -> str:
    """Serialise the export document as indented JSON with a trailing newline."""
    return json.dumps(build_export(metrics, resource), indent=2, ensure_ascii=False) + "\n"
