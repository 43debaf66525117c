"""Metrics module - collection, aggregation and polling."""

from ktop.controllers.metrics.collector import CollectionError, MetricsCollector
from ktop.controllers.metrics.partial import Partial, first_warning
from ktop.controllers.metrics.scheduler import PollingScheduler
from ktop.controllers.metrics.source import ResourceStateSource

__all__ = [
    "CollectionError",
    "MetricsCollector",
    "Partial",
    "PollingScheduler",
    "ResourceStateSource",
    "first_warning",
]
