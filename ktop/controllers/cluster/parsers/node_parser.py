"""Node parser for cluster controller - parses node JSON into descriptors."""

from __future__ import annotations

from typing import Any

from ktop.constants.values import ACCELERATOR_RESOURCE, EPHEMERAL_STORAGE_RESOURCE
from ktop.models.core.descriptors import (
    NodeConditionDescriptor,
    NodeDescriptor,
    ResourceQuantities,
)
from ktop.utils.resource_parser import (
    cpu_to_millicores,
    memory_str_to_bytes,
    quantity_to_int,
)


class NodeParser:
    """Parses node data into structured formats."""

    @staticmethod
    def _parse_quantities(resources: dict[str, Any]) -> ResourceQuantities:
        """Parse a capacity/allocatable mapping into base units."""
        accelerator = resources.get(ACCELERATOR_RESOURCE)
        return ResourceQuantities(
            cpu_milli=cpu_to_millicores(resources.get("cpu", "0")),
            memory_bytes=memory_str_to_bytes(resources.get("memory", "0")),
            ephemeral_storage_bytes=memory_str_to_bytes(
                resources.get(EPHEMERAL_STORAGE_RESOURCE, "0")
            ),
            accelerator_count=(
                quantity_to_int(accelerator) if accelerator is not None else None
            ),
        )

    def parse_node(self, node: dict[str, Any]) -> NodeDescriptor:
        """Parse a single node item from ``kubectl get nodes -o json``.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeDescriptor object.
        """
        metadata = node.get("metadata", {}) or {}
        status = node.get("status", {}) or {}

        conditions = [
            NodeConditionDescriptor(type=str(c["type"]), active=c.get("status") == "True")
            for c in status.get("conditions", []) or []
            if "type" in c
        ]

        return NodeDescriptor(
            name=metadata.get("name", "Unknown"),
            capacity=self._parse_quantities(status.get("capacity", {}) or {}),
            allocatable=self._parse_quantities(status.get("allocatable", {}) or {}),
            conditions=conditions,
            labels={str(k): str(v) for k, v in (metadata.get("labels") or {}).items()},
        )

    def parse_node_list(self, items: list[dict[str, Any]]) -> list[NodeDescriptor]:
        return [self.parse_node(item) for item in items]
