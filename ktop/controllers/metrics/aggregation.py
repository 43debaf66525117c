"""Merge descriptors with usage samples and compute cluster totals.

Every function here is pure: the collector feeds it one cycle's reads and
gets back snapshot entities.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from contextlib import suppress

from ktop.constants.enums import NodeStatus, PodStatus
from ktop.constants.values import ACCELERATOR_MEMORY_LABEL
from ktop.models.core.cluster_metrics import ClusterTotals
from ktop.models.core.descriptors import (
    NodeConditionDescriptor,
    NodeDescriptor,
    UsageSample,
    WorkloadDescriptor,
)
from ktop.models.core.node_info import (
    AcceleratorInfo,
    NodeConditions,
    NodeInfo,
    ResourceUsage,
)
from ktop.models.core.pod_info import PodInfo

_MIB = 1024 * 1024

_PHASE_STATUS = {
    "Running": PodStatus.RUNNING,
    "Pending": PodStatus.PENDING,
    "Succeeded": PodStatus.SUCCEEDED,
    "Failed": PodStatus.FAILED,
}

# Condition type -> NodeConditions field
_PRESSURE_CONDITIONS = {
    "MemoryPressure": "memory_pressure",
    "DiskPressure": "disk_pressure",
    "PIDPressure": "pid_pressure",
    "NetworkUnavailable": "network_unavailable",
}


def derive_node_status(conditions: Iterable[NodeConditionDescriptor]) -> NodeStatus:
    """Ready if the Ready condition is active, NotReady if inactive, else Unknown."""
    for condition in conditions:
        if condition.type == "Ready":
            return NodeStatus.READY if condition.active else NodeStatus.NOT_READY
    return NodeStatus.UNKNOWN


def derive_conditions(conditions: Iterable[NodeConditionDescriptor]) -> NodeConditions:
    flags = {
        _PRESSURE_CONDITIONS[c.type]: True
        for c in conditions
        if c.type in _PRESSURE_CONDITIONS and c.active
    }
    return NodeConditions(**flags)


def derive_pod_status(phase: str) -> PodStatus:
    return _PHASE_STATUS.get(phase, PodStatus.UNKNOWN)


def derive_accelerator(descriptor: NodeDescriptor) -> AcceleratorInfo | None:
    """Accelerator info from capacity (falling back to allocatable).

    Returns None when no accelerator capacity is reported or the count is 0.
    """
    count = descriptor.capacity.accelerator_count
    if count is None:
        count = descriptor.allocatable.accelerator_count
    if not count:
        return None

    memory_total = 0
    label = descriptor.labels.get(ACCELERATOR_MEMORY_LABEL)
    if label is not None:
        with suppress(ValueError):
            memory_total = int(label) * _MIB
    return AcceleratorInfo(count=count, memory_total=memory_total)


def count_pods_per_node(pods: Iterable[WorkloadDescriptor]) -> Counter[str]:
    return Counter(pod.node_name for pod in pods if pod.node_name)


def build_node(
    descriptor: NodeDescriptor,
    usage: UsageSample | None,
    pod_count: int = 0,
) -> NodeInfo:
    """Merge one node descriptor with its usage sample.

    A node without a sample keeps zero usage and zero percent.
    """
    cpu_used = usage.cpu_milli if usage is not None else 0
    memory_used = usage.memory_bytes if usage is not None else 0
    return NodeInfo(
        name=descriptor.name,
        status=derive_node_status(descriptor.conditions),
        cpu=ResourceUsage.from_values(cpu_used, descriptor.capacity.cpu_milli),
        memory=ResourceUsage.from_values(memory_used, descriptor.capacity.memory_bytes),
        disk=ResourceUsage.from_values(0, descriptor.capacity.ephemeral_storage_bytes),
        accelerator=derive_accelerator(descriptor),
        pod_count=pod_count,
        conditions=derive_conditions(descriptor.conditions),
        labels=dict(descriptor.labels),
    )


def build_nodes(
    descriptors: Sequence[NodeDescriptor],
    usage: Mapping[str, UsageSample],
    pod_counts: Mapping[str, int],
) -> tuple[NodeInfo, ...]:
    return tuple(
        build_node(d, usage.get(d.name), pod_counts.get(d.name, 0))
        for d in descriptors
    )


def build_pod(descriptor: WorkloadDescriptor, usage: UsageSample | None) -> PodInfo:
    return PodInfo(
        namespace=descriptor.namespace,
        name=descriptor.name,
        node_name=descriptor.node_name,
        status=derive_pod_status(descriptor.phase),
        cpu=usage.cpu_milli if usage is not None else 0,
        memory=usage.memory_bytes if usage is not None else 0,
        container_count=len(descriptor.containers),
        restart_count=sum(descriptor.restart_counts),
    )


def build_pods(
    descriptors: Sequence[WorkloadDescriptor],
    usage: Mapping[str, UsageSample],
) -> tuple[PodInfo, ...]:
    return tuple(build_pod(d, usage.get(d.key)) for d in descriptors)


def collect_namespaces(pods: Iterable[WorkloadDescriptor]) -> list[str]:
    """Distinct namespaces, sorted lexically."""
    return sorted({pod.namespace for pod in pods})


def calculate_totals(
    nodes: Sequence[NodeInfo],
    pods: Sequence[PodInfo],
) -> ClusterTotals:
    """Sum per-node fields once over ``nodes`` and count ``pods``."""
    return ClusterTotals(
        cpu_capacity=sum(n.cpu.capacity for n in nodes),
        cpu_used=sum(n.cpu.current for n in nodes),
        cpu_core_count=sum(n.cpu.capacity // 1000 for n in nodes),
        memory_capacity=sum(n.memory.capacity for n in nodes),
        memory_used=sum(n.memory.current for n in nodes),
        disk_capacity=sum(n.disk.capacity for n in nodes),
        disk_used=sum(n.disk.current for n in nodes),
        accelerator_count=sum(n.accelerator.count for n in nodes if n.accelerator),
        workload_count=len(pods),
        node_count=len(nodes),
        ready_node_count=sum(1 for n in nodes if n.status == NodeStatus.READY),
    )
