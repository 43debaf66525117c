"""Core snapshot and source-boundary models."""

from ktop.models.core.cluster_metrics import (
    ClusterIdentity,
    ClusterMetrics,
    ClusterTotals,
)
from ktop.models.core.descriptors import (
    NodeConditionDescriptor,
    NodeDescriptor,
    ResourceQuantities,
    UsageSample,
    WorkloadDescriptor,
)
from ktop.models.core.node_info import (
    AcceleratorInfo,
    NodeConditions,
    NodeInfo,
    ResourceUsage,
    safe_percent,
)
from ktop.models.core.pod_info import PodInfo

__all__ = [
    "AcceleratorInfo",
    "ClusterIdentity",
    "ClusterMetrics",
    "ClusterTotals",
    "NodeConditionDescriptor",
    "NodeConditions",
    "NodeDescriptor",
    "NodeInfo",
    "PodInfo",
    "ResourceQuantities",
    "ResourceUsage",
    "UsageSample",
    "WorkloadDescriptor",
    "safe_percent",
]
