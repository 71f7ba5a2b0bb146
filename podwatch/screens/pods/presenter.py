"""Pods screen presenter - polling, render cycles and pod lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from textual.message import Message
from textual.worker import get_current_worker

from podwatch.controllers import PodsController
from podwatch.models.core.diagnostics import UnrecognizedContainerState
from podwatch.models.core.pod_view import ViewTree
from podwatch.screens.pods.config import PODS_REFRESH_WORKER_NAME
from podwatch.screens.pods.navigation import PodNavigationIndex
from podwatch.screens.pods.view_tree import build_view_tree
from podwatch.utils.time_utils import StructuredTime

logger = logging.getLogger(__name__)


class PodsDataLoaded(Message):
    """Message indicating a pod refresh completed."""

    def __init__(self, pod_count: int) -> None:
        super().__init__()
        self.pod_count = pod_count


class PodsDataLoadFailed(Message):
    """Message indicating a pod refresh failed."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class PodsPresenter:
    """Presenter for PodsScreen data and render cycles."""

    def __init__(self, screen: Any, controller: PodsController) -> None:
        self._screen = screen
        self._controller = controller
        self._is_loading = False
        self._error_message = ""
        self._view_tree: ViewTree | None = None
        self._navigation_index = PodNavigationIndex()
        self._reported_diagnostics: set[UnrecognizedContainerState] = set()

    @property
    def controller(self) -> PodsController:
        return self._controller

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def view_tree(self) -> ViewTree | None:
        return self._view_tree

    @property
    def navigation_index(self) -> PodNavigationIndex:
        return self._navigation_index

    def load_data(self, *, force: bool = False) -> None:
        """Start a background refresh.

        A tick arriving while a refresh is still running is skipped. With
        ``force`` the running refresh is cancelled and replaced.
        """
        if self._is_loading and not force:
            logger.debug("Pod refresh still running, skipping tick")
            return
        self._is_loading = True
        self._screen.run_worker(
            self._refresh_worker,
            name=PODS_REFRESH_WORKER_NAME,
            exclusive=True,
        )

    @staticmethod
    def _friendly_error(error: BaseException) -> str:
        msg = str(error)
        if "timed out" in msg.lower() or "timeout" in msg.lower():
            return "Connection timed out"
        if "connection refused" in msg.lower():
            return "Connection refused"
        if len(msg) > 80:
            return msg[:77] + "..."
        return msg or "Unknown error"

    async def _refresh_worker(self) -> None:
        """Worker: fetch pods once and notify the screen."""
        worker = get_current_worker()
        try:
            pods = await self._controller.refresh()
        except Exception as exc:
            if worker.is_cancelled:
                return
            self._is_loading = False
            self._error_message = self._friendly_error(exc)
            self._screen.post_message(PodsDataLoadFailed(self._error_message))
            return

        if worker.is_cancelled:
            return
        self._is_loading = False
        self._error_message = ""
        self._screen.post_message(PodsDataLoaded(len(pods)))

    def render_cycle(
        self,
        now: datetime | StructuredTime | None = None,
        *,
        pods: Mapping[str, Mapping[str, Any]] | None = None,
        has_received_data: bool | None = None,
    ) -> ViewTree:
        """Build the view tree and a fresh navigation index for one cycle.

        Both are derived from the same snapshot so a pod shown in the tree
        can always be resolved until the next cycle replaces them.
        """
        snapshot = self._controller.pods if pods is None else pods
        received = (
            self._controller.has_received_data
            if has_received_data is None
            else has_received_data
        )
        self._navigation_index = PodNavigationIndex(snapshot)
        self._view_tree = build_view_tree(snapshot, received, now)
        self._report_diagnostics(self._view_tree.diagnostics)
        return self._view_tree

    def _report_diagnostics(
        self, diagnostics: tuple[UnrecognizedContainerState, ...]
    ) -> None:
        """Log diagnostics that were not present in the previous cycle."""
        current = set(diagnostics)
        for diagnostic in diagnostics:
            if diagnostic not in self._reported_diagnostics:
                logger.warning(diagnostic.describe())
        self._reported_diagnostics = current

    def resolve_pod(self, pod_name: str) -> Mapping[str, Any]:
        """Return the raw pod for a displayed pod name.

        Raises:
            PodNotFoundError: The pod left the snapshot.
        """
        return self._navigation_index.resolve(pod_name)
