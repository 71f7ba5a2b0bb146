"""Widgets module for the PodWatch TUI.

This module provides all reusable widgets organized into submodules:
- display: Display widgets (CustomStatic)
- special: Specialized widgets (CustomTree)
"""

# Display widgets
from podwatch.widgets.display import (
    CustomStatic,
)

# Special widgets
from podwatch.widgets.special import (
    CustomTree,
)

__all__ = [
    # Display
    "CustomStatic",
    # Special
    "CustomTree",
]
