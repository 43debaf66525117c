"""Node fetcher for cluster controller - fetches node data from Kubernetes cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from ktop.controllers.cluster.parsers import NodeParser
from ktop.models.core.descriptors import NodeDescriptor

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches node descriptors from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func
        self._parser = NodeParser()

    async def fetch_nodes(self) -> list[NodeDescriptor]:
        """Fetch and parse every node in the cluster."""
        output = await self._run_kubectl(("get", "nodes", "-o", "json"))
        items = json.loads(output).get("items", []) or []
        nodes = self._parser.parse_node_list(items)
        logger.debug("Fetched %d node descriptors", len(nodes))
        return nodes
