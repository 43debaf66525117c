"""Dashboard view state and the cycles that step through it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from ktop.constants.enums import NodeSortField, PodSortField, ViewMode

# field -> (next field, flip direction)
NODE_SORT_CYCLE: Final[dict[NodeSortField, tuple[NodeSortField, bool]]] = {
    NodeSortField.NAME: (NodeSortField.CPU, False),
    NodeSortField.CPU: (NodeSortField.MEMORY, False),
    NodeSortField.MEMORY: (NodeSortField.STATUS, False),
    NodeSortField.STATUS: (NodeSortField.PODS, False),
    NodeSortField.PODS: (NodeSortField.NAME, True),
}

POD_SORT_CYCLE: Final[dict[PodSortField, tuple[PodSortField, bool]]] = {
    PodSortField.NAMESPACE: (PodSortField.NAME, False),
    PodSortField.NAME: (PodSortField.CPU, False),
    PodSortField.CPU: (PodSortField.MEMORY, False),
    PodSortField.MEMORY: (PodSortField.NAMESPACE, True),
    PodSortField.STATUS: (PodSortField.CPU, False),
}

VIEW_MODE_CYCLE: Final[dict[ViewMode, ViewMode]] = {
    ViewMode.SPLIT: ViewMode.NODES,
    ViewMode.NODES: ViewMode.PODS,
    ViewMode.PODS: ViewMode.SPLIT,
}


def next_namespace_filter(current: str, namespaces: list[str]) -> str:
    """Step the namespace filter: "" -> first -> ... -> last -> "".

    A filter that is no longer among the known namespaces resets to "".
    """
    if not namespaces:
        return current
    if current == "":
        return namespaces[0]
    try:
        index = namespaces.index(current)
    except ValueError:
        return ""
    if index == len(namespaces) - 1:
        return ""
    return namespaces[index + 1]


@dataclass(frozen=True)
class AppState:
    """What the dashboard shows and how it is ordered."""

    view_mode: ViewMode = ViewMode.SPLIT
    node_sort_field: NodeSortField = NodeSortField.CPU
    node_sort_ascending: bool = False
    pod_sort_field: PodSortField = PodSortField.CPU
    pod_sort_ascending: bool = False
    namespace_filter: str = ""
    show_system: bool = False

    def next_node_sort(self) -> AppState:
        field, flip = NODE_SORT_CYCLE[self.node_sort_field]
        ascending = not self.node_sort_ascending if flip else self.node_sort_ascending
        return replace(self, node_sort_field=field, node_sort_ascending=ascending)

    def next_pod_sort(self) -> AppState:
        field, flip = POD_SORT_CYCLE[self.pod_sort_field]
        ascending = not self.pod_sort_ascending if flip else self.pod_sort_ascending
        return replace(self, pod_sort_field=field, pod_sort_ascending=ascending)

    def next_view_mode(self) -> AppState:
        return replace(self, view_mode=VIEW_MODE_CYCLE[self.view_mode])

    def next_namespace(self, namespaces: list[str]) -> AppState:
        return replace(
            self,
            namespace_filter=next_namespace_filter(self.namespace_filter, namespaces),
        )

    def clear_namespace(self) -> AppState:
        return replace(self, namespace_filter="")

    def toggle_system(self) -> AppState:
        return replace(self, show_system=not self.show_system)
