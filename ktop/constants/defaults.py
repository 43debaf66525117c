"""Default values for settings.

All default values used in the AppSettings model.
"""

from typing import Final

# ============================================================================
# Display defaults
# ============================================================================

TOP_PODS_DEFAULT: Final = 30
ALL_NAMESPACES_DEFAULT: Final = False

# ============================================================================
# Threshold defaults (percent)
# ============================================================================

WARNING_PERCENT_DEFAULT: Final = 50.0
CRITICAL_PERCENT_DEFAULT: Final = 80.0

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"

__all__ = [
    "ALL_NAMESPACES_DEFAULT",
    "CRITICAL_PERCENT_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "TOP_PODS_DEFAULT",
    "WARNING_PERCENT_DEFAULT",
]
