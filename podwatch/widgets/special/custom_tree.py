"""Custom tree widget for the TUI application.

Standard Reactive Pattern:
- Wraps Textual's Tree; node ``data`` carries the pod name for pod nodes
- Expanded nodes are remembered by their data so a rebuild keeps them open

CSS Classes: widget-custom-tree
"""

from __future__ import annotations

from typing import Any, ClassVar

from rich.text import Text
from textual.widgets import Tree
from textual.widgets.tree import TreeNode


class CustomTree(Tree[Any]):
    """Tree widget used to paint the pods view."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-custom-tree"

    def __init__(self, label: str | Text, *args: Any, **kwargs: Any) -> None:
        """Initialize the custom tree.

        Args:
            label: Root label.
            *args: Positional arguments passed to Tree.
            **kwargs: Keyword arguments passed to Tree.
        """
        if not kwargs.get("classes"):
            kwargs["classes"] = self._DEFAULT_CLASSES
        super().__init__(label, *args, **kwargs)

    def expanded_data(self) -> set[Any]:
        """Return ``data`` of every expanded node below the root."""
        expanded: set[Any] = set()
        stack: list[TreeNode[Any]] = list(self.root.children)
        while stack:
            node = stack.pop()
            if node.is_expanded and node.data is not None:
                expanded.add(node.data)
            stack.extend(node.children)
        return expanded

    def cursor_data(self) -> Any:
        """Return ``data`` of the node under the cursor, walking up to the nearest parent with data."""
        node = self.cursor_node
        while node is not None:
            if node.data is not None:
                return node.data
            node = node.parent
        return None
