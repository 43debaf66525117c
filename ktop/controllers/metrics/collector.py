"""Metrics collector: one bounded collection cycle into one snapshot."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from ktop.constants.timeouts import COLLECT_TIMEOUT_DEFAULT
from ktop.controllers.metrics.aggregation import (
    build_nodes,
    build_pods,
    calculate_totals,
    collect_namespaces,
    count_pods_per_node,
)
from ktop.controllers.metrics.partial import Partial, first_warning
from ktop.controllers.metrics.source import ResourceStateSource
from ktop.models.cache.snapshot_store import SnapshotStore
from ktop.models.core.cluster_metrics import ClusterIdentity, ClusterMetrics

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """A mandatory descriptor read failed or ran past the cycle deadline."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


def _describe(error: BaseException, budget: float) -> str:
    if isinstance(error, asyncio.TimeoutError):
        return f"deadline of {budget:g}s exceeded"
    return str(error) or type(error).__name__


class MetricsCollector:
    """Merges the four resource-state reads into a ClusterMetrics snapshot.

    Notes:
    - All reads of one cycle run concurrently and share one deadline.
    - Node and workload descriptors are mandatory. If either fails,
      ``collect`` raises CollectionError and the store keeps its previous
      snapshot; node data read in the same cycle is discarded.
    - Usage samples are best effort. A failed usage read leaves the affected
      entities at zero usage and the first such failure (nodes before
      workloads) is recorded in ``ClusterMetrics.error``.
    """

    SOURCE_NODES = "node descriptors"
    SOURCE_NODE_USAGE = "node usage"
    SOURCE_WORKLOADS = "workload descriptors"
    SOURCE_WORKLOAD_USAGE = "workload usage"

    def __init__(
        self,
        source: ResourceStateSource,
        store: SnapshotStore | None = None,
        cluster: ClusterIdentity | None = None,
        timeout: float = COLLECT_TIMEOUT_DEFAULT,
    ) -> None:
        self._source = source
        self._store = store if store is not None else SnapshotStore()
        self.cluster = cluster if cluster is not None else ClusterIdentity()
        self.timeout = timeout

    @property
    def store(self) -> SnapshotStore:
        return self._store

    async def collect(self, timeout: float | None = None) -> ClusterMetrics:
        """Run one collection cycle and install the resulting snapshot.

        Args:
            timeout: Cycle budget in seconds; defaults to the collector timeout.

        Returns:
            The newly installed snapshot.

        Raises:
            CollectionError: When a descriptor read fails or exceeds the deadline.
        """
        budget = self.timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        deadline = loop.time() + budget
        start = time.perf_counter()

        async def bounded(read: Callable[[], Awaitable[Any]]) -> Any:
            return await asyncio.wait_for(read(), timeout=max(0.0, deadline - loop.time()))

        results = await asyncio.gather(
            bounded(self._source.list_node_descriptors),
            bounded(self._source.list_node_usage_samples),
            bounded(self._source.list_workload_descriptors),
            bounded(self._source.list_workload_usage_samples),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
        node_result, node_usage_result, pod_result, pod_usage_result = results

        if isinstance(node_result, Exception):
            raise CollectionError(
                self.SOURCE_NODES, _describe(node_result, budget)
            ) from node_result
        if isinstance(pod_result, Exception):
            raise CollectionError(
                self.SOURCE_WORKLOADS, _describe(pod_result, budget)
            ) from pod_result

        node_usage = self._best_effort(self.SOURCE_NODE_USAGE, node_usage_result, budget)
        pod_usage = self._best_effort(self.SOURCE_WORKLOAD_USAGE, pod_usage_result, budget)

        nodes = build_nodes(node_result, node_usage.value, count_pods_per_node(pod_result))
        pods = build_pods(pod_result, pod_usage.value)
        snapshot = ClusterMetrics(
            timestamp=datetime.now(timezone.utc),
            cluster=self.cluster,
            nodes=nodes,
            pods=pods,
            error=first_warning(node_usage, pod_usage),
            totals=calculate_totals(nodes, pods),
        )
        self._store.replace(snapshot, collect_namespaces(pod_result))

        logger.debug(
            "Collected %d nodes and %d pods in %.1fms",
            len(nodes),
            len(pods),
            (time.perf_counter() - start) * 1000,
        )
        return snapshot

    @staticmethod
    def _best_effort(source: str, result: Any, budget: float) -> Partial[dict]:
        if isinstance(result, Exception):
            message = f"{source}: {_describe(result, budget)}"
            logger.warning("Usage samples unavailable, continuing without them: %s", message)
            return Partial(value={}, warning=message)
        return Partial(value=result)

    def get_last_metrics(self) -> ClusterMetrics | None:
        return self._store.get()

    def get_namespaces(self) -> list[str]:
        """Sorted namespaces seen in the last successful cycle."""
        return self._store.get_namespaces()
