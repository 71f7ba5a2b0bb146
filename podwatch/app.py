"""Main application class for PodWatch TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from podwatch.constants import APP_TITLE
from podwatch.controllers import PodsController
from podwatch.keyboard.app import APP_BINDINGS
from podwatch.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from podwatch.screens.pods import PodsScreen

logger = logging.getLogger(__name__)


class PodWatchApp(App[None]):
    """Main TUI application for PodWatch."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: PodsController | None = None,
        config_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        self.controller = controller or PodsController(
            context=self.settings.context or None,
            namespace=self.settings.namespace,
            request_timeout=self.settings.request_timeout,
        )

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = AppSettings()

    @property
    def scope_label(self) -> str:
        context = self.settings.context or "current context"
        return f"{context} / {self.settings.namespace}"

    def on_mount(self) -> None:
        self.sub_title = self.scope_label
        self.push_screen(
            PodsScreen(self.controller, refresh_interval=self.settings.refresh_interval)
        )
