"""Constants module for ktop.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, resource names, namespace sets)
- timeouts.py: Timeout and interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in the ktop.keyboard module.
"""

from ktop.constants.defaults import (
    CRITICAL_PERCENT_DEFAULT,
    TOP_PODS_DEFAULT,
    WARNING_PERCENT_DEFAULT,
)
from ktop.constants.enums import (
    NodeSortField,
    NodeStatus,
    PodSortField,
    PodStatus,
    SchedulerState,
    ViewMode,
)
from ktop.constants.limits import (
    REFRESH_INTERVAL_MAX,
    REFRESH_INTERVAL_MIN,
    TOP_PODS_MAX,
    TOP_PODS_MIN,
)
from ktop.constants.timeouts import (
    COLLECT_TIMEOUT_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from ktop.constants.values import (
    APP_SUBTITLE,
    APP_TITLE,
    SYSTEM_NAMESPACES,
)

__all__ = [
    # Application
    "APP_SUBTITLE",
    "APP_TITLE",
    "SYSTEM_NAMESPACES",
    # Timeouts
    "COLLECT_TIMEOUT_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    # Defaults
    "CRITICAL_PERCENT_DEFAULT",
    "TOP_PODS_DEFAULT",
    "WARNING_PERCENT_DEFAULT",
    # Limits
    "REFRESH_INTERVAL_MAX",
    "REFRESH_INTERVAL_MIN",
    "TOP_PODS_MAX",
    "TOP_PODS_MIN",
    # Enums
    "NodeSortField",
    "NodeStatus",
    "PodSortField",
    "PodStatus",
    "SchedulerState",
    "ViewMode",
]
