"""Shared fixtures for metrics pipeline tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from ktop.models.core.descriptors import (
    NodeConditionDescriptor,
    NodeDescriptor,
    ResourceQuantities,
    UsageSample,
    WorkloadDescriptor,
)


def make_node(
    name: str,
    cpu_milli: int = 4000,
    memory_bytes: int = 8 * 1024**3,
    ready: bool | None = True,
    accelerators: int | None = None,
    labels: dict[str, str] | None = None,
) -> NodeDescriptor:
    conditions = [] if ready is None else [NodeConditionDescriptor(type="Ready", active=ready)]
    return NodeDescriptor(
        name=name,
        capacity=ResourceQuantities(
            cpu_milli=cpu_milli,
            memory_bytes=memory_bytes,
            ephemeral_storage_bytes=100 * 1024**3,
            accelerator_count=accelerators,
        ),
        conditions=conditions,
        labels=labels or {},
    )


def make_pod(
    namespace: str,
    name: str,
    node_name: str = "node-1",
    phase: str = "Running",
    restarts: list[int] | None = None,
) -> WorkloadDescriptor:
    restart_counts = restarts if restarts is not None else [0]
    return WorkloadDescriptor(
        namespace=namespace,
        name=name,
        node_name=node_name,
        phase=phase,
        containers=[f"c{i}" for i in range(len(restart_counts))],
        restart_counts=restart_counts,
    )


class FakeSource:
    """In-memory resource-state source.

    Each read returns the configured value or raises the configured error.
    ``gate`` (when set) blocks every node-descriptor read until released.
    """

    def __init__(self) -> None:
        self.nodes: list[NodeDescriptor] = [make_node("node-1")]
        self.node_usage: dict[str, UsageSample] = {}
        self.pods: list[WorkloadDescriptor] = []
        self.pod_usage: dict[str, UsageSample] = {}
        self.errors: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}
        self.gate: asyncio.Event | None = None
        self.calls: dict[str, int] = {}

    async def _read(self, key: str, value: Any) -> Any:
        self.calls[key] = self.calls.get(key, 0) + 1
        if key in self.delays:
            await asyncio.sleep(self.delays[key])
        if key in self.errors:
            raise self.errors[key]
        return value

    async def list_node_descriptors(self) -> list[NodeDescriptor]:
        if self.gate is not None:
            await self.gate.wait()
        return await self._read("nodes", list(self.nodes))

    async def list_node_usage_samples(self) -> dict[str, UsageSample]:
        return await self._read("node_usage", dict(self.node_usage))

    async def list_workload_descriptors(self) -> list[WorkloadDescriptor]:
        return await self._read("pods", list(self.pods))

    async def list_workload_usage_samples(self) -> dict[str, UsageSample]:
        return await self._read("pod_usage", dict(self.pod_usage))


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def node_factory() -> Any:
    return make_node


@pytest.fixture
def pod_factory() -> Any:
    return make_pod
