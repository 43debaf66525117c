"""Parsers for cluster controller."""

from ktop.controllers.cluster.parsers.node_parser import NodeParser
from ktop.controllers.cluster.parsers.pod_parser import PodParser
from ktop.controllers.cluster.parsers.usage_parser import UsageParser

__all__ = ["NodeParser", "PodParser", "UsageParser"]
