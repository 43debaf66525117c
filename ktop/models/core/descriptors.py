"""Raw records exchanged with a resource-state source.

Descriptors are the slow-changing resource descriptions (capacity, labels,
phase); usage samples are point-in-time consumption readings.
"""

from pydantic import BaseModel, Field


class ResourceQuantities(BaseModel):
    """Capacity or allocatable amounts of a node in base units."""

    cpu_milli: int = 0
    memory_bytes: int = 0
    ephemeral_storage_bytes: int = 0
    accelerator_count: int | None = None


class NodeConditionDescriptor(BaseModel):
    """One reported node condition."""

    type: str
    active: bool = False


class NodeDescriptor(BaseModel):
    name: str
    capacity: ResourceQuantities = Field(default_factory=ResourceQuantities)
    allocatable: ResourceQuantities = Field(default_factory=ResourceQuantities)
    conditions: list[NodeConditionDescriptor] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)


class WorkloadDescriptor(BaseModel):
    namespace: str
    name: str
    node_name: str = ""
    phase: str = ""
    containers: list[str] = Field(default_factory=list)
    restart_counts: list[int] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"


class UsageSample(BaseModel):
    """CPU (millicores) and memory (bytes) consumption of a node or pod."""

    cpu_milli: int = 0
    memory_bytes: int = 0
