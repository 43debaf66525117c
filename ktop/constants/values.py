"""Scalar constants for ktop.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "ktop"
APP_SUBTITLE: Final = "Kubernetes Cluster Monitor"

# ============================================================================
# Kubernetes resource names
# ============================================================================

ACCELERATOR_RESOURCE: Final = "nvidia.com/gpu"
ACCELERATOR_MEMORY_LABEL: Final = "nvidia.com/gpu.memory"
EPHEMERAL_STORAGE_RESOURCE: Final = "ephemeral-storage"

NODE_METRICS_PATH: Final = "/apis/metrics.k8s.io/v1beta1/nodes"
POD_METRICS_PATH: Final = "/apis/metrics.k8s.io/v1beta1/pods"

# Namespaces reserved for the cluster control plane
SYSTEM_NAMESPACES: Final = frozenset(
    {
        "kube-system",
        "kube-public",
        "kube-node-lease",
    }
)

# ============================================================================
# Export mode
# ============================================================================

EXPORT_RESOURCES: Final = "resources"
EXPORT_PODS: Final = "pods"
EXPORT_NODES: Final = "nodes"
EXPORT_CHOICES: Final = (EXPORT_RESOURCES, EXPORT_PODS, EXPORT_NODES)

__all__ = [
    "ACCELERATOR_MEMORY_LABEL",
    "ACCELERATOR_RESOURCE",
    "APP_SUBTITLE",
    "APP_TITLE",
    "EPHEMERAL_STORAGE_RESOURCE",
    "EXPORT_CHOICES",
    "EXPORT_NODES",
    "EXPORT_PODS",
    "EXPORT_RESOURCES",
    "NODE_METRICS_PATH",
    "POD_METRICS_PATH",
    "SYSTEM_NAMESPACES",
]
