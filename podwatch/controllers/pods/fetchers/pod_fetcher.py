"""Pod fetcher for pods controller - fetches raw pod records from the cluster."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from podwatch.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, RETRY_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod data from Kubernetes cluster."""

    _TIMEOUT_ERROR_TOKENS = (
        "timed out",
        "timeout",
        "deadline exceeded",
        "i/o timeout",
        "context deadline exceeded",
    )

    def __init__(self, run_kubectl_func: Callable[[tuple[str, ...]], Awaitable[str]]) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @classmethod
    def _is_timeout_error(cls, error: Exception) -> bool:
        """Return True when error indicates timeout-like failure."""
        message = str(error).lower()
        return any(token in message for token in cls._TIMEOUT_ERROR_TOKENS)

    @staticmethod
    def _build_pods_args(
        *,
        request_timeout: str,
        namespace: str,
    ) -> tuple[str, ...]:
        """Build pod list arguments for one namespace."""
        args: list[str] = ["get", "pods", "-n", namespace]
        args.extend(["-o", "json", f"--request-timeout={request_timeout}"])
        return tuple(args)

    async def fetch_pods_raw(
        self,
        *,
        namespace: str,
        request_timeout: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw pod items of one namespace.

        Timeouts are retried once with a longer request timeout; any other
        kubectl failure propagates.
        """
        timeout_plan: list[str] = []
        for timeout in (
            request_timeout or CLUSTER_REQUEST_TIMEOUT,
            RETRY_REQUEST_TIMEOUT,
        ):
            if timeout not in timeout_plan:
                timeout_plan.append(timeout)

        output = ""
        for attempt, timeout in enumerate(timeout_plan, start=1):
            try:
                output = await self._run_kubectl(
                    self._build_pods_args(request_timeout=timeout, namespace=namespace)
                )
                break
            except Exception as exc:
                is_retryable = self._is_timeout_error(exc)
                has_next_attempt = attempt < len(timeout_plan)
                if is_retryable and has_next_attempt:
                    logger.warning(
                        "Pod fetch timed out (attempt %s/%s with %s, namespace=%s), retrying",
                        attempt,
                        len(timeout_plan),
                        timeout,
                        namespace,
                    )
                    continue
                raise

        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.exception("Error parsing pods JSON")
            return []

        items = data.get("items", []) if isinstance(data, dict) else []
        return [item for item in items if isinstance(item, dict)]
