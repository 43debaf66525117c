"""Pod snapshot models."""

from pydantic import BaseModel, ConfigDict

from ktop.constants.enums import PodStatus


class PodInfo(BaseModel):
    """A pod as seen in one collection cycle.

    CPU is in millicores and memory in bytes, both summed across containers.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    node_name: str = ""
    status: PodStatus = PodStatus.UNKNOWN
    cpu: int = 0
    memory: int = 0
    container_count: int = 0
    restart_count: int = 0

    @property
    def key(self) -> str:
        """Composite ``namespace/name`` key."""
        return f"{self.namespace}/{self.name}"
