"""Fetchers for cluster controller."""

from ktop.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from ktop.controllers.cluster.fetchers.pod_fetcher import PodFetcher
from ktop.controllers.cluster.fetchers.usage_fetcher import UsageFetcher

__all__ = ["NodeFetcher", "PodFetcher", "UsageFetcher"]
