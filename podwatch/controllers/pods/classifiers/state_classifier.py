"""Container state classifier - derives a display label and severity per container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from podwatch.constants.enums import ContainerLifecycle, StateSeverity
from podwatch.constants.values import (
    STATE_LABEL_PENDING,
    STATE_LABEL_RUNNING,
    STATE_LABEL_TERMINATED_FALLBACK,
    STATE_LABEL_UNKNOWN,
    STATE_LABEL_WAITING_FALLBACK,
)
from podwatch.models.core.container_info import (
    ContainerSpecInfo,
    ContainerState,
    ContainerStatusInfo,
    RunningState,
    TerminatedState,
    UnknownState,
    WaitingState,
)
from podwatch.models.core.diagnostics import UnrecognizedContainerState


@dataclass(frozen=True)
class ContainerClassification:
    """Result of classifying one spec/status pairing."""

    label: str
    severity: StateSeverity
    lifecycle: ContainerLifecycle
    started_at: str | None = None
    diagnostic: UnrecognizedContainerState | None = None


def resolve_started_at(state: ContainerState) -> str | None:
    """Return ``startedAt`` from running, terminated or waiting, in that order."""
    for variant in (RunningState, TerminatedState, WaitingState):
        if isinstance(state, variant) and state.started_at:
            return state.started_at
    return None


class ContainerStateClassifier:
    """Classifies container statuses into lifecycle, label and severity.

    Precedence, first match wins:
        1. no status              -> "Pending", neutral
        2. running                -> "Running", success
        3. terminated, exit 0     -> reason, success
        4. terminated, exit != 0  -> reason, error
        5. waiting                -> reason, warning
        6. anything else          -> "Warn", warning, plus a diagnostic
    """

    def classify(
        self,
        spec: ContainerSpecInfo,
        status: ContainerStatusInfo | None,
    ) -> ContainerClassification:
        """Classify one container.

        Args:
            spec: Declared container.
            status: Matching runtime status, or None when not reported yet.

        Returns:
            ContainerClassification; ``diagnostic`` is set only for
            unrecognized state shapes.
        """
        if status is None:
            return ContainerClassification(
                label=STATE_LABEL_PENDING,
                severity=StateSeverity.NEUTRAL,
                lifecycle=ContainerLifecycle.PENDING,
            )

        state = status.state
        started_at = resolve_started_at(state)

        if isinstance(state, RunningState):
            return ContainerClassification(
                label=STATE_LABEL_RUNNING,
                severity=StateSeverity.SUCCESS,
                lifecycle=ContainerLifecycle.RUNNING,
                started_at=started_at,
            )
        if isinstance(state, TerminatedState):
            return ContainerClassification(
                label=state.reason or STATE_LABEL_TERMINATED_FALLBACK,
                severity=(
                    StateSeverity.SUCCESS if state.exit_code == 0 else StateSeverity.ERROR
                ),
                lifecycle=ContainerLifecycle.TERMINATED,
                started_at=started_at,
            )
        if isinstance(state, WaitingState):
            return ContainerClassification(
                label=state.reason or STATE_LABEL_WAITING_FALLBACK,
                severity=StateSeverity.WARNING,
                lifecycle=ContainerLifecycle.WAITING,
                started_at=started_at,
            )
        if isinstance(state, UnknownState):
            return ContainerClassification(
                label=STATE_LABEL_UNKNOWN,
                severity=StateSeverity.WARNING,
                lifecycle=ContainerLifecycle.UNKNOWN,
                diagnostic=UnrecognizedContainerState(
                    container_name=spec.name,
                    keys=state.keys,
                ),
            )
        assert_never(state)
