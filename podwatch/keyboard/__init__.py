"""Keyboard bindings module.

This module provides all keyboard bindings for the PodWatch TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from podwatch.keyboard.app import APP_BINDINGS
from podwatch.keyboard.navigation import (
    POD_DETAIL_SCREEN_BINDINGS,
    PODS_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "POD_DETAIL_SCREEN_BINDINGS",
    "PODS_SCREEN_BINDINGS",
]
