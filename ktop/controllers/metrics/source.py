"""Resource-state source protocol consumed by the metrics collector."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ktop.models.core.descriptors import (
    NodeDescriptor,
    UsageSample,
    WorkloadDescriptor,
)


@runtime_checkable
class ResourceStateSource(Protocol):
    """Four independent reads against the cluster.

    Descriptor reads are mandatory for a collection cycle; usage-sample reads
    are best effort. Workload usage is keyed by ``namespace/name`` and already
    summed across containers.
    """

    async def list_node_descriptors(self) -> list[NodeDescriptor]: ...

    async def list_node_usage_samples(self) -> dict[str, UsageSample]: ...

    async def list_workload_descriptors(self) -> list[WorkloadDescriptor]: ...

    async def list_workload_usage_samples(self) -> dict[str, UsageSample]: ...
