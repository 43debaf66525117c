"""Usage fetcher for cluster controller - reads the metrics.k8s.io API."""

from __future__ import annotations

import json
import logging
from typing import Any

from ktop.constants.values import NODE_METRICS_PATH, POD_METRICS_PATH
from ktop.controllers.cluster.parsers import UsageParser
from ktop.models.core.descriptors import UsageSample

logger = logging.getLogger(__name__)


class UsageFetcher:
    """Fetches point-in-time usage samples from the metrics API.

    The metrics API is an optional cluster add-on; when it is missing kubectl
    exits non-zero and the error propagates to the caller.
    """

    def __init__(self, run_kubectl_func: Any) -> None:
        self._run_kubectl = run_kubectl_func
        self._parser = UsageParser()

    async def _fetch_items(self, path: str) -> list[dict[str, Any]]:
        output = await self._run_kubectl(("get", "--raw", path))
        return json.loads(output).get("items", []) or []

    async def fetch_node_usage(self) -> dict[str, UsageSample]:
        """Return node name -> usage sample."""
        return self._parser.parse_node_metrics(await self._fetch_items(NODE_METRICS_PATH))

    async def fetch_pod_usage(self) -> dict[str, UsageSample]:
        """Return "namespace/name" -> usage sample."""
        samples = self._parser.parse_pod_metrics(await self._fetch_items(POD_METRICS_PATH))
        logger.debug("Fetched %d pod usage samples", len(samples))
        return samples
