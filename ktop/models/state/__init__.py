"""Application state and settings models."""

from ktop.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)
from ktop.models.state.app_state import AppState, next_namespace_filter

__all__ = [
    "AppSettings",
    "AppState",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "next_namespace_filter",
]
