"""Pod detail modal - shows the full raw pod record as YAML.

CSS Classes: pod-detail-dialog
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml
from rich.syntax import Syntax
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen

from podwatch.keyboard import POD_DETAIL_SCREEN_BINDINGS
from podwatch.widgets import CustomStatic


def pod_to_yaml(pod: Mapping[str, Any]) -> str:
    """Serialize a raw pod for display, keeping API key order."""
    return yaml.safe_dump(dict(pod), sort_keys=False, default_flow_style=False)


class PodDetailScreen(ModalScreen[None]):
    """Modal showing one pod's full record."""

    BINDINGS = POD_DETAIL_SCREEN_BINDINGS

    DEFAULT_CSS = """
    PodDetailScreen {
        align: center middle;
    }

    #pod-detail-container {
        width: 90%;
        height: 90%;
        border: round $accent;
        background: $surface;
        padding: 0 1;
    }

    .pod-detail-title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    """

    def __init__(self, pod: Mapping[str, Any]) -> None:
        super().__init__()
        self._pod = pod
        metadata = pod.get("metadata") or {}
        self._title = f"{metadata.get('namespace') or '-'}/{metadata.get('name') or '?'}"

    @property
    def pod(self) -> Mapping[str, Any]:
        return self._pod

    def compose(self) -> ComposeResult:
        with Vertical(id="pod-detail-container", classes="pod-detail-dialog"):
            yield CustomStatic(self._title, classes="pod-detail-title")
            with VerticalScroll():
                yield CustomStatic(
                    Syntax(pod_to_yaml(self._pod), "yaml", word_wrap=True),
                    id="pod-detail-body",
                )

    def action_dismiss_detail(self) -> None:
        self.dismiss(None)
