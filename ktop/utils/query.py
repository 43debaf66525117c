"""Sort, filter and limit helpers over snapshot entities.

All functions are pure and return new lists. Sorting is stable in both
directions: entities with equal keys keep their relative input order, so
repeated redraws of identical values never reshuffle rows.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Final

from ktop.constants.enums import NodeSortField, PodSortField, status_ordinal
from ktop.constants.values import SYSTEM_NAMESPACES
from ktop.models.core.node_info import NodeInfo
from ktop.models.core.pod_info import PodInfo

NODE_SORT_KEYS: Final[dict[NodeSortField, Callable[[NodeInfo], Any]]] = {
    NodeSortField.NAME: lambda node: node.name.lower(),
    NodeSortField.CPU: lambda node: node.cpu.percent,
    NodeSortField.MEMORY: lambda node: node.memory.percent,
    NodeSortField.STATUS: lambda node: status_ordinal(node.status),
    NodeSortField.PODS: lambda node: node.pod_count,
}

POD_SORT_KEYS: Final[dict[PodSortField, Callable[[PodInfo], Any]]] = {
    PodSortField.NAMESPACE: lambda pod: pod.namespace.lower(),
    PodSortField.NAME: lambda pod: pod.name.lower(),
    PodSortField.CPU: lambda pod: pod.cpu,
    PodSortField.MEMORY: lambda pod: pod.memory,
    PodSortField.STATUS: lambda pod: status_ordinal(pod.status),
}


def is_system_namespace(namespace: str) -> bool:
    """Return True for namespaces reserved for the cluster control plane."""
    return namespace in SYSTEM_NAMESPACES


def sort_nodes(
    nodes: Sequence[NodeInfo],
    field: NodeSortField | str,
    ascending: bool,
) -> list[NodeInfo]:
    """Return nodes ordered by *field*.

    An unrecognised field orders by name, ascending.
    """
    key = NODE_SORT_KEYS.get(field) if isinstance(field, NodeSortField) else None
    if key is None:
        return sorted(nodes, key=lambda node: node.name)
    return sorted(nodes, key=key, reverse=not ascending)


def sort_pods(
    pods: Sequence[PodInfo],
    field: PodSortField | str,
    ascending: bool,
) -> list[PodInfo]:
    """Return pods ordered by *field*.

    An unrecognised field orders by name, ascending.
    """
    key = POD_SORT_KEYS.get(field) if isinstance(field, PodSortField) else None
    if key is None:
        return sorted(pods, key=lambda pod: pod.name)
    return sorted(pods, key=key, reverse=not ascending)


def filter_pods(
    pods: Sequence[PodInfo],
    namespace: str,
    include_system: bool,
) -> list[PodInfo]:
    """Keep pods in *namespace* ("" for all), hiding system namespaces unless asked."""
    return [
        pod
        for pod in pods
        if (namespace == "" or pod.namespace == namespace)
        and (include_system or not is_system_namespace(pod.namespace))
    ]


def limit_pods(pods: Sequence[PodInfo], limit: int) -> list[PodInfo]:
    """Return the first *limit* pods of the given ordering."""
    return list(pods[: max(limit, 0)])
