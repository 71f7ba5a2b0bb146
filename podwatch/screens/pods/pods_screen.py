"""Pods screen - live pod and container status tree."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import NamedTuple

from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Header
from textual.widgets.tree import TreeNode

from podwatch.constants.defaults import REFRESH_INTERVAL_DEFAULT
from podwatch.constants.values import (
    CONTAINERS_SECTION_LABEL,
    PODS_EMPTY_LABEL,
    PODS_LOADING_LABEL,
)
from podwatch.controllers import PodsController
from podwatch.keyboard import PODS_SCREEN_BINDINGS
from podwatch.models.core.pod_view import ContainerView, PodView, ViewTree
from podwatch.screens.detail.pod_detail_screen import PodDetailScreen
from podwatch.screens.pods.config import (
    FIELD_NAME_STYLE,
    PLACEHOLDER_STYLE,
    POD_NAME_STYLE,
    PODS_STATUS_ID,
    PODS_TREE_ID,
    SEVERITY_STYLES,
    STATUS_FAILED,
    STATUS_UPDATED,
    STATUS_WAITING,
)
from podwatch.screens.pods.navigation import PodNotFoundError
from podwatch.screens.pods.presenter import (
    PodsDataLoaded,
    PodsDataLoadFailed,
    PodsPresenter,
)
from podwatch.widgets import CustomStatic, CustomTree

logger = logging.getLogger(__name__)


class TreeNodeRef(NamedTuple):
    """Identity of an expandable node, stable across re-renders."""

    pod_name: str
    path: str = ""


def _field(name: str, value: str | Text) -> Text:
    return Text.assemble((f"{name}: ", FIELD_NAME_STYLE), value)


def pod_label(pod: PodView) -> Text:
    return Text(pod.name, style=POD_NAME_STYLE)


def state_text(container: ContainerView) -> Text:
    return Text(container.state_label, style=SEVERITY_STYLES[container.state_severity])


def container_label(container: ContainerView) -> Text:
    return Text.assemble((container.name, POD_NAME_STYLE), "  ", state_text(container))


def container_fields(container: ContainerView) -> list[Text]:
    """Leaf lines shown under an expanded container."""
    lines = [_field("Image", container.image)]
    if container.restart_count is not None:
        lines.append(_field("Restarts", str(container.restart_count)))
    if container.started_ago is not None:
        lines.append(_field("Started", container.started_ago))
    lines.append(_field("State", state_text(container)))
    return lines


def pod_fields(pod: PodView) -> list[Text]:
    """Leaf lines shown under an expanded pod, before its containers."""
    lines: list[Text] = []
    if pod.name_label is not None:
        lines.append(_field("Name", pod.name_label))
    if pod.job_name_label is not None:
        lines.append(_field("Job Name", pod.job_name_label))
    lines.append(_field("Namespace", pod.namespace or "-"))
    return lines


class PodsScreen(Screen[None]):
    """Screen painting the pods view tree and polling for updates."""

    BINDINGS = PODS_SCREEN_BINDINGS

    DEFAULT_CSS = """
    PodsScreen #pods-tree {
        height: 1fr;
    }

    PodsScreen #pods-status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        controller: PodsController,
        refresh_interval: float = REFRESH_INTERVAL_DEFAULT,
    ) -> None:
        super().__init__()
        self.presenter = PodsPresenter(self, controller)
        self._refresh_interval = refresh_interval
        self._refresh_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield CustomTree("Pods", id=PODS_TREE_ID)
        yield CustomStatic(STATUS_WAITING, id=PODS_STATUS_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.render_pods()
        self.presenter.load_data()
        self._refresh_timer = self.set_interval(
            self._refresh_interval, self.presenter.load_data
        )
        self.query_one(f"#{PODS_TREE_ID}", CustomTree).focus()

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_pods(self, now: datetime | None = None) -> ViewTree:
        """Run one render cycle and paint the result."""
        view_tree = self.presenter.render_cycle(now)
        self._paint_tree(view_tree)
        return view_tree

    def _paint_tree(self, view_tree: ViewTree) -> None:
        tree = self.query_one(f"#{PODS_TREE_ID}", CustomTree)
        expanded = tree.expanded_data()
        tree.clear()
        tree.root.set_label(view_tree.title)
        tree.root.expand()

        if view_tree.is_loading:
            tree.root.add_leaf(Text(PODS_LOADING_LABEL, style=PLACEHOLDER_STYLE))
            return
        if view_tree.is_empty:
            tree.root.add_leaf(Text(PODS_EMPTY_LABEL, style=PLACEHOLDER_STYLE))
            return

        for pod in view_tree.pods:
            self._add_pod_node(tree.root, pod, expanded)

    @staticmethod
    def _add_pod_node(
        root: TreeNode[TreeNodeRef | None],
        pod: PodView,
        expanded: set[TreeNodeRef],
    ) -> None:
        pod_ref = TreeNodeRef(pod.name)
        pod_node = root.add(pod_label(pod), data=pod_ref, expand=pod_ref in expanded)
        for line in pod_fields(pod):
            pod_node.add_leaf(line, data=pod_ref)

        if not pod.containers:
            return

        section_ref = TreeNodeRef(pod.name, "containers")
        section = pod_node.add(
            Text(CONTAINERS_SECTION_LABEL, style=FIELD_NAME_STYLE),
            data=section_ref,
            expand=section_ref in expanded,
        )
        for container in pod.containers:
            container_ref = TreeNodeRef(pod.name, f"containers/{container.name}")
            container_node = section.add(
                container_label(container),
                data=container_ref,
                expand=container_ref in expanded,
            )
            for line in container_fields(container):
                container_node.add_leaf(line, data=container_ref)

    def _set_status(self, text: str) -> None:
        self.query_one(f"#{PODS_STATUS_ID}", CustomStatic).update(text)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def on_pods_data_loaded(self, message: PodsDataLoaded) -> None:
        self.render_pods()
        last_updated = (
            self.presenter.controller.fetch_status.last_updated
            or datetime.now(timezone.utc)
        )
        updated = last_updated.astimezone().strftime("%H:%M:%S")
        self._set_status(STATUS_UPDATED.format(count=message.pod_count, updated=updated))

    def on_pods_data_load_failed(self, message: PodsDataLoadFailed) -> None:
        self.render_pods()
        self._set_status(STATUS_FAILED.format(error=message.error))
        self.notify(message.error, title="Refresh failed", severity="error")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_refresh(self) -> None:
        self.presenter.load_data(force=True)

    def action_show_details(self) -> None:
        """Open the detail view for the pod under the cursor."""
        ref = self.query_one(f"#{PODS_TREE_ID}", CustomTree).cursor_data()
        if not isinstance(ref, TreeNodeRef):
            return
        try:
            pod = self.presenter.resolve_pod(ref.pod_name)
        except PodNotFoundError as exc:
            logger.info("Detail requested for missing pod %s", exc.pod_name)
            self.notify(str(exc), severity="warning")
            return
        self.app.push_screen(PodDetailScreen(pod))
