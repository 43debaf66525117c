"""Utility functions for ktop."""

from ktop.utils.formatting import (
    format_age,
    format_cpu,
    format_memory,
    format_percent,
    parse_duration,
    truncate,
)
from ktop.utils.query import (
    filter_pods,
    is_system_namespace,
    limit_pods,
    sort_nodes,
    sort_pods,
)

__all__ = [
    # Formatting
    "format_age",
    "format_cpu",
    "format_memory",
    "format_percent",
    "parse_duration",
    "truncate",
    # Query
    "filter_pods",
    "is_system_namespace",
    "limit_pods",
    "sort_nodes",
    "sort_pods",
]
