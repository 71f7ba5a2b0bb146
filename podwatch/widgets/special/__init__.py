"""Special widgets for PodWatch TUI.

This module provides specialized widgets for various purposes:
- CustomTree: Tree data structure display
"""

from podwatch.widgets.special.custom_tree import CustomTree

__all__ = [
    "CustomTree",
]
