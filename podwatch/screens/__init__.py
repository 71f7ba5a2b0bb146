"""PodWatch TUI Screens.

This package contains all screen modules for the TUI application.

Domain Structure:
    - pods/   - Live pod and container status tree
    - detail/ - Pod detail modal

Note: Keybindings live in the keyboard/ package
(podwatch.keyboard.*_SCREEN_BINDINGS).
"""

from __future__ import annotations

from podwatch.screens.detail import PodDetailScreen
from podwatch.screens.pods import PodsScreen

__all__ = [
    "PodDetailScreen",
    "PodsScreen",
]
