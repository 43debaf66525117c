"""Tests for dashboard view state cycles."""

from __future__ import annotations

import pytest

from ktop.constants.enums import NodeSortField, PodSortField, ViewMode
from ktop.models.state.app_state import (
    NODE_SORT_CYCLE,
    POD_SORT_CYCLE,
    AppState,
    next_namespace_filter,
)


@pytest.mark.unit
@pytest.mark.fast
class TestAppState:
    """Tests for AppState transitions."""

    def test_defaults(self) -> None:
        state = AppState()
        assert state.view_mode == ViewMode.SPLIT
        assert state.node_sort_field == NodeSortField.CPU
        assert state.node_sort_ascending is False
        assert state.pod_sort_field == PodSortField.CPU
        assert state.pod_sort_ascending is False
        assert state.namespace_filter == ""
        assert state.show_system is False

    def test_every_sort_field_has_a_successor(self) -> None:
        assert set(NODE_SORT_CYCLE) == set(NodeSortField)
        assert set(POD_SORT_CYCLE) == set(PodSortField)

    def test_node_sort_cycle_flips_on_wrap(self) -> None:
        state = AppState(node_sort_field=NodeSortField.NAME, node_sort_ascending=True)
        fields = []
        for _ in range(5):
            state = state.next_node_sort()
            fields.append(state.node_sort_field)
        assert fields == [
            NodeSortField.CPU,
            NodeSortField.MEMORY,
            NodeSortField.STATUS,
            NodeSortField.PODS,
            NodeSortField.NAME,
        ]
        assert state.node_sort_ascending is False

    def test_pod_sort_cycle(self) -> None:
        state = AppState(pod_sort_field=PodSortField.NAMESPACE, pod_sort_ascending=True)
        state = state.next_pod_sort().next_pod_sort().next_pod_sort()
        assert state.pod_sort_field == PodSortField.MEMORY
        assert state.pod_sort_ascending is True
        state = state.next_pod_sort()
        assert state.pod_sort_field == PodSortField.NAMESPACE
        assert state.pod_sort_ascending is False

    def test_pod_status_sort_moves_to_cpu(self) -> None:
        state = AppState(pod_sort_field=PodSortField.STATUS).next_pod_sort()
        assert state.pod_sort_field == PodSortField.CPU

    def test_view_mode_cycle(self) -> None:
        state = AppState()
        modes = []
        for _ in range(3):
            state = state.next_view_mode()
            modes.append(state.view_mode)
        assert modes == [ViewMode.NODES, ViewMode.PODS, ViewMode.SPLIT]

    def test_transitions_return_new_state(self) -> None:
        state = AppState()
        toggled = state.toggle_system()
        assert state.show_system is False
        assert toggled.show_system is True


@pytest.mark.unit
@pytest.mark.fast
class TestNamespaceCycle:
    """Tests for namespace filter cycling."""

    def test_full_cycle(self) -> None:
        namespaces = ["api", "web"]
        assert next_namespace_filter("", namespaces) == "api"
        assert next_namespace_filter("api", namespaces) == "web"
        assert next_namespace_filter("web", namespaces) == ""

    def test_no_namespaces_keeps_filter(self) -> None:
        assert next_namespace_filter("", []) == ""
        assert next_namespace_filter("gone", []) == "gone"

    def test_vanished_namespace_resets(self) -> None:
        assert next_namespace_filter("gone", ["api"]) == ""

    def test_state_helpers(self) -> None:
        state = AppState().next_namespace(["api"])
        assert state.namespace_filter == "api"
        assert state.clear_namespace().namespace_filter == ""
