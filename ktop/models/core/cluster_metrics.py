"""Cluster snapshot models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ktop.models.core.node_info import NodeInfo, safe_percent
from ktop.models.core.pod_info import PodInfo


class ClusterIdentity(BaseModel):
    """Which cluster the snapshot describes."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    context: str = ""
    server: str = ""
    namespace: str = ""


class ClusterTotals(BaseModel):
    """Cluster-wide aggregates, summed over one snapshot's nodes and pods."""

    model_config = ConfigDict(frozen=True)

    cpu_capacity: int = 0
    cpu_used: int = 0
    cpu_core_count: int = 0
    memory_capacity: int = 0
    memory_used: int = 0
    disk_capacity: int = 0
    disk_used: int = 0
    accelerator_count: int = 0
    workload_count: int = 0
    node_count: int = 0
    ready_node_count: int = 0

    @property
    def cpu_percent(self) -> float:
        return safe_percent(self.cpu_used, self.cpu_capacity)

    @property
    def memory_percent(self) -> float:
        return safe_percent(self.memory_used, self.memory_capacity)

    @property
    def disk_percent(self) -> float:
        return safe_percent(self.disk_used, self.disk_capacity)


class ClusterMetrics(BaseModel):
    """One fully merged, self-consistent view of the cluster.

    Immutable once built. ``error`` carries the first non-fatal failure of the
    cycle that produced it (a usage-sample read that failed), if any.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    cluster: ClusterIdentity = ClusterIdentity()
    nodes: tuple[NodeInfo, ...] = ()
    pods: tuple[PodInfo, ...] = ()
    error: str | None = None
    totals: ClusterTotals = Field(default_factory=ClusterTotals)
