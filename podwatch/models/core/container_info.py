"""Container spec, status and state models.

Container state is a tagged union: exactly one of ``RunningState``,
``TerminatedState``, ``WaitingState`` or ``UnknownState``. The ``kind``
field is the discriminator.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class RunningState(BaseModel):
    """Container is running."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["running"] = "running"
    started_at: str | None = None


class TerminatedState(BaseModel):
    """Container has terminated, successfully or not."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["terminated"] = "terminated"
    started_at: str | None = None
    exit_code: int | None = None
    reason: str | None = None


class WaitingState(BaseModel):
    """Container is waiting to start (image pull, crash loop backoff, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["waiting"] = "waiting"
    reason: str | None = None
    started_at: str | None = None


class UnknownState(BaseModel):
    """State shape that matched none of the known variants."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    keys: tuple[str, ...] = ()


ContainerState = Annotated[
    RunningState | TerminatedState | WaitingState | UnknownState,
    Field(discriminator="kind"),
]


class ContainerSpecInfo(BaseModel):
    """Declared container from ``spec.containers``."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str = ""


class ContainerStatusInfo(BaseModel):
    """Runtime status from ``status.containerStatuses``."""

    model_config = ConfigDict(frozen=True)

    name: str
    restart_count: int = Field(default=0, ge=0)
    state: ContainerState = Field(default_factory=UnknownState)
