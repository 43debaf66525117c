"""All enum definitions for ktop.

This module consolidates all enumerations used throughout the application.
Declaration order is meaningful: status enums sort by it (ordinal order).
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================


class NodeStatus(Enum):
    """Node status values derived from the Ready condition."""

    READY = "Ready"
    NOT_READY = "NotReady"
    UNKNOWN = "Unknown"


class PodStatus(Enum):
    """Pod status values derived from the pod phase."""

    RUNNING = "Running"
    PENDING = "Pending"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Application State Enums
# =============================================================================


class SchedulerState(Enum):
    """Polling scheduler state."""

    IDLE = "idle"
    COLLECTING = "collecting"
    STOPPED = "stopped"


class ViewMode(Enum):
    """Dashboard layout modes."""

    SPLIT = "split"
    NODES = "nodes"
    PODS = "pods"


# =============================================================================
# Sort Enums
# =============================================================================


class NodeSortField(Enum):
    """Sort fields for the nodes table."""

    NAME = "Name"
    CPU = "CPU"
    MEMORY = "Memory"
    STATUS = "Status"
    PODS = "Pods"


class PodSortField(Enum):
    """Sort fields for the pods table."""

    NAMESPACE = "Namespace"
    NAME = "Name"
    CPU = "CPU"
    MEMORY = "Memory"
    STATUS = "Status"


def status_ordinal(status: Enum) -> int:
    """Return the declaration index of a status member."""
    return list(type(status)).index(status)


__all__ = [
    # Status
    "NodeStatus",
    "PodStatus",
    "status_ordinal",
    # App state
    "SchedulerState",
    "ViewMode",
    # Sort
    "NodeSortField",
    "PodSortField",
]
