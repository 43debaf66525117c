"""Controllers module for ktop.

This module provides the kubectl-backed resource-state source and the
metrics collection pipeline built on top of it.
"""

from __future__ import annotations

# Base classes
from ktop.controllers.base import BaseController, WorkerResult

# Cluster domain
from ktop.controllers.cluster.controller import ClusterController, KubectlError

# Metrics pipeline
from ktop.controllers.metrics import (
    CollectionError,
    MetricsCollector,
    PollingScheduler,
    ResourceStateSource,
)

__all__ = [
    # Base
    "BaseController",
    "WorkerResult",
    # Cluster domain
    "ClusterController",
    "KubectlError",
    # Metrics
    "CollectionError",
    "MetricsCollector",
    "PollingScheduler",
    "ResourceStateSource",
]
