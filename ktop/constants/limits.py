"""Limit and threshold constants for ktop.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 0.5
REFRESH_INTERVAL_MAX: Final = 60.0
TIMEOUT_MIN: Final = 1.0
TOP_PODS_MIN: Final = 1
TOP_PODS_MAX: Final = 1000
THRESHOLD_MIN: Final = 1
THRESHOLD_MAX: Final = 100

# ============================================================================
# Display limits
# ============================================================================

NAMESPACE_COLUMN_MAX: Final = 20
POD_NAME_COLUMN_MAX: Final = 40
NODE_NAME_COLUMN_MAX: Final = 20
RESTARTS_WARNING: Final = 0
RESTARTS_CRITICAL: Final = 5

__all__ = [
    "NAMESPACE_COLUMN_MAX",
    "NODE_NAME_COLUMN_MAX",
    "POD_NAME_COLUMN_MAX",
    "REFRESH_INTERVAL_MAX",
    "REFRESH_INTERVAL_MIN",
    "RESTARTS_CRITICAL",
    "RESTARTS_WARNING",
    "THRESHOLD_MAX",
    "THRESHOLD_MIN",
    "TIMEOUT_MIN",
    "TOP_PODS_MAX",
    "TOP_PODS_MIN",
]
