"""Cluster controller for kubectl-backed resource state.

This module is the resource-state source used by the metrics collector. It
delegates node, workload and usage reads to specialized fetchers that share
one kubectl runner.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
import subprocess
from typing import Any

from ktop.constants.timeouts import (
    CLUSTER_IDENTITY_TIMEOUT,
    COLLECT_TIMEOUT_DEFAULT,
    KUBECTL_PROCESS_TIMEOUT_SLACK,
    METRICS_API_CHECK_TIMEOUT,
)
from ktop.controllers.base import BaseController
from ktop.controllers.cluster.fetchers import NodeFetcher, PodFetcher, UsageFetcher
from ktop.models.core.cluster_metrics import ClusterIdentity
from ktop.models.core.descriptors import (
    NodeDescriptor,
    UsageSample,
    WorkloadDescriptor,
)

logger = logging.getLogger(__name__)


class KubectlError(RuntimeError):
    """A kubectl invocation failed, timed out, or kubectl is not installed."""


class ClusterController(BaseController):
    """Kubernetes resource-state source backed by the kubectl CLI.

    Every read is a blocking ``subprocess.run`` pushed to a worker thread, so
    the four reads of a collection cycle can run concurrently.
    """

    SOURCE_NODES = "nodes"
    SOURCE_NODE_USAGE = "node_usage"
    SOURCE_WORKLOADS = "workloads"
    SOURCE_WORKLOAD_USAGE = "workload_usage"

    def __init__(
        self,
        kubeconfig: str | None = None,
        context: str | None = None,
        request_timeout: float = COLLECT_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize the cluster controller.

        Args:
            kubeconfig: Optional kubeconfig path passed as ``--kubeconfig``.
            context: Optional Kubernetes context name.
            request_timeout: Per-request API timeout in seconds.
        """
        super().__init__()
        self.kubeconfig = kubeconfig
        self.context = context
        self.request_timeout = request_timeout

        self._node_fetcher = NodeFetcher(self._run_kubectl)
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._usage_fetcher = UsageFetcher(self._run_kubectl)

    def _request_timeout_flag(self) -> str:
        return f"{max(1, math.ceil(self.request_timeout))}s"

    def _base_command(self) -> list[str]:
        cmd = ["kubectl"]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        return cmd

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: float | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._base_command()
        cmd.append(f"--request-timeout={self._request_timeout_flag()}")
        cmd.extend(args)
        effective_timeout = (
            timeout
            if timeout is not None
            else math.ceil(self.request_timeout) + KUBECTL_PROCESS_TIMEOUT_SLACK
        )
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except FileNotFoundError as e:
            raise KubectlError("kubectl not found in PATH") from e
        except subprocess.TimeoutExpired as e:
            raise KubectlError(f"kubectl timed out after {effective_timeout}s") from e
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        logger.debug("kubectl %s", " ".join(args))
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    # ------------------------------------------------------------------
    # Resource-state source
    # ------------------------------------------------------------------

    async def list_node_descriptors(self) -> list[NodeDescriptor]:
        return await self._node_fetcher.fetch_nodes()

    async def list_node_usage_samples(self) -> dict[str, UsageSample]:
        return await self._usage_fetcher.fetch_node_usage()

    async def list_workload_descriptors(self) -> list[WorkloadDescriptor]:
        return await self._pod_fetcher.fetch_pods()

    async def list_workload_usage_samples(self) -> dict[str, UsageSample]:
        return await self._usage_fetcher.fetch_pod_usage()

    # ------------------------------------------------------------------
    # Startup checks
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_identity(config: dict[str, Any], context_override: str | None) -> ClusterIdentity:
        """Pick the active context, its cluster and server out of a kubeconfig view."""
        context_name = context_override or config.get("current-context", "") or ""
        context_entry: dict[str, Any] = {}
        for item in config.get("contexts", []) or []:
            if item.get("name") == context_name:
                context_entry = item.get("context", {}) or {}
                break

        cluster_name = context_entry.get("cluster", "") or ""
        server = ""
        for item in config.get("clusters", []) or []:
            if not cluster_name or item.get("name") == cluster_name:
                server = (item.get("cluster", {}) or {}).get("server", "") or ""
                break

        return ClusterIdentity(
            name=cluster_name or server,
            context=context_name,
            server=server,
            namespace=context_entry.get("namespace", "") or "",
        )

    async def resolve_cluster_identity(self) -> ClusterIdentity:
        """Describe the cluster the configured context points at.

        Raises:
            KubectlError: When the kubeconfig cannot be read.
        """
        output = await asyncio.to_thread(
            self._run_kubectl_sync,
            ("config", "view", "--minify", "-o", "json"),
            CLUSTER_IDENTITY_TIMEOUT,
        )
        try:
            config = json.loads(output)
        except json.JSONDecodeError as e:
            raise KubectlError(f"Invalid kubeconfig output: {e}") from e
        identity = self._parse_identity(config, self.context)
        logger.info("Using context %s (cluster %s)", identity.context, identity.name)
        return identity

    async def check_connection(self) -> bool:
        """Check if the API server answers."""
        try:
            await self._run_kubectl(("get", "--raw", "/version"))
        except KubectlError as e:
            logger.error("Cluster connection check failed: %s", e)
            return False
        return True

    async def check_metrics_api(self) -> None:
        """Read node usage once.

        Raises:
            KubectlError: When the metrics API is not reachable.
            asyncio.TimeoutError: When the read exceeds the check timeout.
        """
        await asyncio.wait_for(
            self.list_node_usage_samples(), timeout=METRICS_API_CHECK_TIMEOUT
        )

    def get_contexts(self) -> list[str]:
        """Return the context names defined in the kubeconfig."""
        output = self._run_kubectl_sync(
            ("config", "get-contexts", "-o", "name"), CLUSTER_IDENTITY_TIMEOUT
        )
        return [line.strip() for line in output.splitlines() if line.strip()]

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all four resource-state reads concurrently.

        Returns:
            Dictionary keyed by source name.
        """
        nodes, node_usage, workloads, workload_usage = await asyncio.gather(
            self.list_node_descriptors(),
            self.list_node_usage_samples(),
            self.list_workload_descriptors(),
            self.list_workload_usage_samples(),
        )
        return {
            self.SOURCE_NODES: nodes,
            self.SOURCE_NODE_USAGE: node_usage,
            self.SOURCE_WORKLOADS: workloads,
            self.SOURCE_WORKLOAD_USAGE: workload_usage,
        }
