"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from podwatch.constants.defaults import (
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from podwatch.constants.limits import REFRESH_INTERVAL_MAX, REFRESH_INTERVAL_MIN
from podwatch.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Cluster scope
    context: str = ""
    namespace: str = NAMESPACE_DEFAULT  # pod names are unique only per namespace

    # Polling
    refresh_interval: int = Field(
        default=REFRESH_INTERVAL_DEFAULT,
        ge=REFRESH_INTERVAL_MIN,
        le=REFRESH_INTERVAL_MAX,
    )  # seconds
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("namespace")
    @classmethod
    def _require_namespace(cls, value: str) -> str:
        normalized = str(value or "").strip()
        if not normalized:
            raise ValueError("namespace must name a single namespace")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = str(value or "").strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
