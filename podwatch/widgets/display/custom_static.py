"""Custom static text widget for the TUI application.

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from typing import Any, ClassVar

from textual.widgets import Static


class CustomStatic(Static):
    """Static text display with the application's default classes."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-custom-static"

    def __init__(self, content: Any = "", *args: Any, **kwargs: Any) -> None:
        classes = f"{self._DEFAULT_CLASSES} {kwargs.pop('classes', '')}".strip()
        super().__init__(content, *args, classes=classes, **kwargs)
