"""Container parser for pods controller - turns raw container dicts into models."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from contextlib import suppress
from typing import Any

from podwatch.models.core.container_info import (
    ContainerSpecInfo,
    ContainerState,
    ContainerStatusInfo,
    RunningState,
    TerminatedState,
    UnknownState,
    WaitingState,
)

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    with suppress(ValueError, TypeError):
        return int(value)
    return None


def parse_container_state(raw_state: Any) -> ContainerState:
    """Resolve a raw ``state`` mapping into one tagged variant.

    When more than one key is present, running wins over terminated, which
    wins over waiting.
    """
    if not isinstance(raw_state, Mapping):
        return UnknownState()

    running = raw_state.get("running")
    if isinstance(running, Mapping):
        return RunningState(started_at=_optional_str(running.get("startedAt")))

    terminated = raw_state.get("terminated")
    if isinstance(terminated, Mapping):
        return TerminatedState(
            started_at=_optional_str(terminated.get("startedAt")),
            exit_code=_optional_int(terminated.get("exitCode")),
            reason=_optional_str(terminated.get("reason")),
        )

    waiting = raw_state.get("waiting")
    if isinstance(waiting, Mapping):
        return WaitingState(
            reason=_optional_str(waiting.get("reason")),
            started_at=_optional_str(waiting.get("startedAt")),
        )

    return UnknownState(keys=tuple(sorted(str(key) for key in raw_state)))


def match_container_statuses(
    specs: Sequence[ContainerSpecInfo],
    statuses: Iterable[ContainerStatusInfo],
) -> list[tuple[ContainerSpecInfo, ContainerStatusInfo | None]]:
    """Pair each declared container with its runtime status by name.

    Spec order is preserved. The first status with an equal name wins;
    statuses without a matching spec are dropped.
    """
    by_name: dict[str, ContainerStatusInfo] = {}
    for status in statuses:
        by_name.setdefault(status.name, status)
    return [(spec, by_name.get(spec.name)) for spec in specs]


class ContainerParser:
    """Parses container specs and statuses of a raw pod."""

    def parse_spec(self, raw_spec: Mapping[str, Any]) -> ContainerSpecInfo:
        """Parse one ``spec.containers`` entry."""
        return ContainerSpecInfo(
            name=str(raw_spec.get("name", "")),
            image=str(raw_spec.get("image") or ""),
        )

    def parse_status(self, raw_status: Mapping[str, Any]) -> ContainerStatusInfo:
        """Parse one ``status.containerStatuses`` entry."""
        restart_count = _optional_int(raw_status.get("restartCount")) or 0
        return ContainerStatusInfo(
            name=str(raw_status.get("name", "")),
            restart_count=max(0, restart_count),
            state=parse_container_state(raw_status.get("state")),
        )

    def parse_specs(self, pod: Mapping[str, Any]) -> list[ContainerSpecInfo]:
        """Parse declared containers in declaration order."""
        spec = pod.get("spec") or {}
        return [
            self.parse_spec(raw)
            for raw in spec.get("containers") or []
            if isinstance(raw, Mapping)
        ]

    def parse_statuses(self, pod: Mapping[str, Any]) -> list[ContainerStatusInfo]:
        """Parse runtime statuses; a pod without status has none."""
        status = pod.get("status") or {}
        return [
            self.parse_status(raw)
            for raw in status.get("containerStatuses") or []
            if isinstance(raw, Mapping)
        ]

    def parse_pairs(
        self, pod: Mapping[str, Any]
    ) -> list[tuple[ContainerSpecInfo, ContainerStatusInfo | None]]:
        """Parse and match the containers of a raw pod."""
        specs = self.parse_specs(pod)
        statuses = self.parse_statuses(pod)
        pairs = match_container_statuses(specs, statuses)
        if logger.isEnabledFor(logging.DEBUG):
            declared = {spec.name for spec in specs}
            dropped = [status.name for status in statuses if status.name not in declared]
            if dropped:
                logger.debug(
                    "Dropping statuses without a declared container: %s",
                    ", ".join(dropped),
                )
        return pairs
