"""Usage parser for cluster controller - parses metrics.k8s.io lists into samples."""

from __future__ import annotations

from typing import Any

from ktop.models.core.descriptors import UsageSample
from ktop.utils.resource_parser import cpu_to_millicores, memory_str_to_bytes


class UsageParser:
    """Parses NodeMetrics / PodMetrics items into usage samples."""

    @staticmethod
    def _sample(usage: dict[str, Any]) -> UsageSample:
        return UsageSample(
            cpu_milli=cpu_to_millicores(usage.get("cpu", "0")),
            memory_bytes=memory_str_to_bytes(usage.get("memory", "0")),
        )

    def parse_node_metrics(self, items: list[dict[str, Any]]) -> dict[str, UsageSample]:
        """Return node name -> usage sample."""
        samples: dict[str, UsageSample] = {}
        for item in items:
            name = (item.get("metadata", {}) or {}).get("name", "")
            if not name:
                continue
            samples[name] = self._sample(item.get("usage", {}) or {})
        return samples

    def parse_pod_metrics(self, items: list[dict[str, Any]]) -> dict[str, UsageSample]:
        """Return "namespace/name" -> usage summed across the pod's containers."""
        samples: dict[str, UsageSample] = {}
        for item in items:
            metadata = item.get("metadata", {}) or {}
            namespace = metadata.get("namespace", "")
            name = metadata.get("name", "")
            if not namespace or not name:
                continue
            cpu = 0
            memory = 0
            for container in item.get("containers", []) or []:
                sample = self._sample(container.get("usage", {}) or {})
                cpu += sample.cpu_milli
                memory += sample.memory_bytes
            samples[f"{namespace}/{name}"] = UsageSample(cpu_milli=cpu, memory_bytes=memory)
        return samples
