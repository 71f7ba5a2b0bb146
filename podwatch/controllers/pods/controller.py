"""Pods controller for cluster pod data.

Runs kubectl, keeps the latest pod snapshot keyed by pod name, and tracks
whether a first successful fetch has happened.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from podwatch.constants.defaults import NAMESPACE_DEFAULT
from podwatch.constants.enums import FetchState
from podwatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from podwatch.controllers.base import BaseController
from podwatch.controllers.pods.fetchers import PodFetcher

logger = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Status tracking for the pods fetch."""

    source_name: str
    state: FetchState = FetchState.LOADING
    error_message: str | None = None
    last_updated: datetime | None = None


class PodsController(BaseController):
    """Controller owning the pod snapshot for the pods view."""

    def __init__(
        self,
        context: str | None = None,
        namespace: str = NAMESPACE_DEFAULT,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the pods controller.

        Args:
            context: Optional Kubernetes context name.
            namespace: Namespace to watch. Pod names are unique within it,
                so the snapshot can be keyed by name.
            request_timeout: kubectl ``--request-timeout`` value.
        """
        self.context = context
        self.namespace = namespace or NAMESPACE_DEFAULT
        self.request_timeout = request_timeout
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._pods: dict[str, dict[str, Any]] = {}
        self._has_received_data = False
        self._fetch_status = FetchStatus(source_name="pods")

    @property
    def pods(self) -> dict[str, dict[str, Any]]:
        """Latest snapshot, pod name to raw pod record."""
        return self._pods

    @property
    def has_received_data(self) -> bool:
        """True once a fetch has succeeded; never reset afterwards."""
        return self._has_received_data

    @property
    def fetch_status(self) -> FetchStatus:
        return self._fetch_status

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        try:
            return await asyncio.to_thread(self._run_kubectl_sync, args)
        except subprocess.TimeoutExpired as exc:
            raise RuntimeError(f"kubectl timed out after {exc.timeout}s") from exc
        except FileNotFoundError as exc:
            raise RuntimeError("kubectl executable not found") from exc

    @staticmethod
    def index_pods(items: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
        """Key raw pods by ``metadata.name``.

        Names are unique within the watched namespace; should the API
        return a repeated name anyway, the first record is kept.
        """
        indexed: dict[str, dict[str, Any]] = {}
        for item in items:
            metadata = item.get("metadata") or {}
            name = metadata.get("name")
            if not name:
                logger.warning("Skipping pod record without metadata.name")
                continue
            if name in indexed:
                logger.warning(
                    "Duplicate pod name %s in namespace %s; keeping the first",
                    name,
                    metadata.get("namespace"),
                )
                continue
            indexed[str(name)] = item
        return indexed

    async def refresh(self) -> dict[str, dict[str, Any]]:
        """Fetch pods and replace the snapshot.

        On failure the previous snapshot and received flag are kept and the
        error propagates to the caller.
        """
        start = time.monotonic()
        self._fetch_status.state = FetchState.LOADING
        try:
            items = await self._pod_fetcher.fetch_pods_raw(
                namespace=self.namespace,
                request_timeout=self.request_timeout,
            )
        except Exception as exc:
            self._fetch_status.state = FetchState.ERROR
            self._fetch_status.error_message = str(exc)
            logger.warning("Pod refresh failed: %s", exc)
            raise

        self._pods = self.index_pods(items)
        self._has_received_data = True
        self._fetch_status.state = FetchState.SUCCESS
        self._fetch_status.error_message = None
        self._fetch_status.last_updated = datetime.now(timezone.utc)
        logger.debug(
            "Fetched %s pods in %.0f ms (namespace=%s)",
            len(self._pods),
            (time.monotonic() - start) * 1000,
            self.namespace,
        )
        return self._pods
