"""Settings loading from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from podwatch.constants.defaults import SETTINGS_PATH_DEFAULT
from podwatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]


class ConfigManager:
    """Loads AppSettings from a YAML file."""

    DEFAULT_PATH = Path(SETTINGS_PATH_DEFAULT).expanduser()

    @classmethod
    def resolve_path(cls, path: str | Path | None = None) -> Path:
        return Path(path).expanduser() if path else cls.DEFAULT_PATH

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppSettings:
        """Load settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        settings_path = cls.resolve_path(path)
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            with settings_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings from {settings_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings in {settings_path} must be a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc
