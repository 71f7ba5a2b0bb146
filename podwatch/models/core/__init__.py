"""Core pod and container models."""

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
from podwatch.models.core.pod_view import ContainerView, PodView, ViewTree

__all__ = [
    "ContainerSpecInfo",
    "ContainerState",
    "ContainerStatusInfo",
    "ContainerView",
    "PodView",
    "RunningState",
    "TerminatedState",
    "UnknownState",
    "UnrecognizedContainerState",
    "ViewTree",
    "WaitingState",
]
