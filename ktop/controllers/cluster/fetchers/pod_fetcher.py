"""Pod fetcher for cluster controller - fetches pod data from Kubernetes cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from ktop.controllers.cluster.parsers import PodParser
from ktop.models.core.descriptors import WorkloadDescriptor

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod descriptors across all namespaces."""

    def __init__(self, run_kubectl_func: Any) -> None:
        self._run_kubectl = run_kubectl_func
        self._parser = PodParser()

    async def fetch_pods(self) -> list[WorkloadDescriptor]:
        output = await self._run_kubectl(
            ("get", "pods", "--all-namespaces", "-o", "json")
        )
        pods = self._parser.parse_pod_list(json.loads(output).get("items", []) or [])
        logger.debug("Fetched %d workload descriptors", len(pods))
        return pods
