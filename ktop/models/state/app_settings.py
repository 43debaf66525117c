"""Application settings models."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ktop.constants.defaults import (
    ALL_NAMESPACES_DEFAULT,
    CRITICAL_PERCENT_DEFAULT,
    LOG_LEVEL_DEFAULT,
    TOP_PODS_DEFAULT,
    WARNING_PERCENT_DEFAULT,
)
from ktop.constants.limits import (
    REFRESH_INTERVAL_MAX,
    REFRESH_INTERVAL_MIN,
    THRESHOLD_MAX,
    THRESHOLD_MIN,
    TIMEOUT_MIN,
    TOP_PODS_MAX,
    TOP_PODS_MIN,
)
from ktop.constants.timeouts import (
    COLLECT_TIMEOUT_DEFAULT,
    REDRAW_INTERVAL_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def default_kubeconfig_path() -> str:
    """Return $KUBECONFIG if set, else ~/.kube/config."""
    kubeconfig = os.environ.get("KUBECONFIG", "")
    if kubeconfig:
        return kubeconfig
    return str(Path.home() / ".kube" / "config")


def default_settings_path() -> Path:
    """Return the default settings file location."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "ktop" / "settings.yaml"


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        allow_inf_nan=False,
    )

    # Cluster access
    kubeconfig_path: str = Field(default_factory=default_kubeconfig_path)
    context: str = ""

    # Collection cadence (seconds)
    refresh_interval: float = REFRESH_INTERVAL_DEFAULT
    timeout: float = COLLECT_TIMEOUT_DEFAULT
    redraw_interval: float = REDRAW_INTERVAL_DEFAULT

    # Display
    top_pods: int = TOP_PODS_DEFAULT
    all_namespaces: bool = ALL_NAMESPACES_DEFAULT

    # Usage colour thresholds (percent)
    warning_percent: float = WARNING_PERCENT_DEFAULT
    critical_percent: float = CRITICAL_PERCENT_DEFAULT

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""

    @field_validator("refresh_interval")
    @classmethod
    def _check_refresh_interval(cls, value: float) -> float:
        if value < REFRESH_INTERVAL_MIN:
            raise ValueError(f"refresh interval must be at least {REFRESH_INTERVAL_MIN}s")
        if value > REFRESH_INTERVAL_MAX:
            raise ValueError(f"refresh interval must not exceed {REFRESH_INTERVAL_MAX}s")
        return value

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value < TIMEOUT_MIN:
            raise ValueError("timeout must be at least 1 second")
        return value

    @field_validator("redraw_interval")
    @classmethod
    def _check_redraw_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("redraw interval must be positive")
        return value

    @field_validator("top_pods")
    @classmethod
    def _check_top_pods(cls, value: int) -> int:
        if value < TOP_PODS_MIN:
            raise ValueError(f"top-pods must be at least {TOP_PODS_MIN}")
        if value > TOP_PODS_MAX:
            raise ValueError(f"top-pods should not exceed {TOP_PODS_MAX}")
        return value

    @field_validator("warning_percent", "critical_percent")
    @classmethod
    def _check_threshold(cls, value: float) -> float:
        if not THRESHOLD_MIN <= value <= THRESHOLD_MAX:
            raise ValueError(f"thresholds must be between {THRESHOLD_MIN} and {THRESHOLD_MAX}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized

    @model_validator(mode="after")
    def _check_threshold_order(self) -> AppSettings:
        if self.warning_percent > self.critical_percent:
            raise ValueError("warning threshold must not exceed critical threshold")
        return self

    def with_overrides(self, **overrides: Any) -> AppSettings:
        """Return a re-validated copy with the non-None overrides applied."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return AppSettings.model_validate(values)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigManager:
    """Loads AppSettings from YAML."""

    @staticmethod
    def load(path: Path | None = None) -> AppSettings:
        """Load settings from *path* (or the default location).

        A missing file yields default settings.

        Raises:
            ConfigLoadError: The file is unreadable, is not a YAML mapping,
                or holds invalid values.
        """
        settings_path = path or default_settings_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"cannot read {settings_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{settings_path} must contain a mapping of settings")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings in {settings_path}: {exc}") from exc
