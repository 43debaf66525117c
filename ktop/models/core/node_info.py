"""Node snapshot models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ktop.constants.enums import NodeStatus


def safe_percent(current: int | float, capacity: int | float) -> float:
    """Return ``current / capacity * 100``, or 0.0 when capacity is not positive.

    The result is not clamped: bursty samples may legitimately exceed capacity.
    """
    if capacity <= 0:
        return 0.0
    return float(current) / float(capacity) * 100


class ResourceUsage(BaseModel):
    """Current usage against capacity for one resource, in base units."""

    model_config = ConfigDict(frozen=True)

    current: int = 0
    capacity: int = 0
    percent: float = 0.0

    @classmethod
    def from_values(cls, current: int, capacity: int) -> ResourceUsage:
        """Build a usage record with the percent derived from current and capacity."""
        return cls(
            current=current,
            capacity=capacity,
            percent=safe_percent(current, capacity),
        )


class AcceleratorInfo(BaseModel):
    """Accelerator capacity reported by a node."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0)
    memory_used: int = 0
    memory_total: int = 0
    utilization: float = 0.0


class NodeConditions(BaseModel):
    """Pressure conditions; each flag is set only when reported as active."""

    model_config = ConfigDict(frozen=True)

    memory_pressure: bool = False
    disk_pressure: bool = False
    pid_pressure: bool = False
    network_unavailable: bool = False


class NodeInfo(BaseModel):
    """A node as seen in one collection cycle."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: NodeStatus = NodeStatus.UNKNOWN
    cpu: ResourceUsage = ResourceUsage()
    memory: ResourceUsage = ResourceUsage()
    disk: ResourceUsage = ResourceUsage()
    accelerator: AcceleratorInfo | None = None
    pod_count: int = 0
    conditions: NodeConditions = NodeConditions()
    labels: dict[str, str] = Field(default_factory=dict)
