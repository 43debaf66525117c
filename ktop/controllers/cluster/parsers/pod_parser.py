"""Pod parser for cluster controller - parses pod JSON into descriptors."""

from __future__ import annotations

from typing import Any

from ktop.models.core.descriptors import WorkloadDescriptor


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def _restart_counts(pod_status: dict[str, Any]) -> list[int]:
        counts: list[int] = []
        for container_status in pod_status.get("containerStatuses", []) or []:
            try:
                counts.append(int(container_status.get("restartCount", 0) or 0))
            except (TypeError, ValueError):
                counts.append(0)
        return counts

    def parse_pod(self, pod: dict[str, Any]) -> WorkloadDescriptor:
        """Parse a single pod item from ``kubectl get pods -o json``."""
        metadata = pod.get("metadata", {}) or {}
        spec = pod.get("spec", {}) or {}
        status = pod.get("status", {}) or {}

        return WorkloadDescriptor(
            namespace=metadata.get("namespace", ""),
            name=metadata.get("name", ""),
            node_name=spec.get("nodeName", "") or "",
            phase=status.get("phase", "") or "",
            containers=[
                str(container.get("name", ""))
                for container in spec.get("containers", []) or []
            ],
            restart_counts=self._restart_counts(status),
        )

    def parse_pod_list(self, items: list[dict[str, Any]]) -> list[WorkloadDescriptor]:
        return [self.parse_pod(item) for item in items]
