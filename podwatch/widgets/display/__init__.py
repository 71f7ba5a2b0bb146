"""Display widgets for PodWatch TUI.

This module provides display widgets that show content:
- CustomStatic: Static text display widget
"""

from podwatch.widgets.display.custom_static import CustomStatic

__all__ = [
    "CustomStatic",
]
