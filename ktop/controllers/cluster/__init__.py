"""Cluster controller module - kubectl-backed resource state."""

from ktop.controllers.cluster.controller import ClusterController, KubectlError

__all__ = ["ClusterController", "KubectlError"]
