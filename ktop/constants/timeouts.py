"""Timeout constants for ktop.

All timeout and interval values for kubectl requests, collection cycles and
redraws.
"""

from typing import Final

# ============================================================================
# Collection timeouts (seconds)
# ============================================================================

COLLECT_TIMEOUT_DEFAULT: Final = 10.0
METRICS_API_CHECK_TIMEOUT: Final = 5.0
CLUSTER_IDENTITY_TIMEOUT: Final = 8

# Process-level slack on top of kubectl's own --request-timeout
KUBECTL_PROCESS_TIMEOUT_SLACK: Final = 5

# ============================================================================
# Refresh cadence (seconds)
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 2.0
REDRAW_INTERVAL_DEFAULT: Final = 0.5

__all__ = [
    "CLUSTER_IDENTITY_TIMEOUT",
    "COLLECT_TIMEOUT_DEFAULT",
    "KUBECTL_PROCESS_TIMEOUT_SLACK",
    "METRICS_API_CHECK_TIMEOUT",
    "REDRAW_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
]
