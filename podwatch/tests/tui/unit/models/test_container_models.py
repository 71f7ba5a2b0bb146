"""Tests for container and diagnostic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from podwatch.models.core.container_info import (
    ContainerStatusInfo,
    TerminatedState,
    UnknownState,
)
from podwatch.models.core.diagnostics import UnrecognizedContainerState


class TestContainerStatusInfo:
    """Tests for ContainerStatusInfo."""

    def test_state_discriminator_from_dict(self) -> None:
        status = ContainerStatusInfo.model_validate(
            {"name": "app", "state": {"kind": "terminated", "exit_code": 1}}
        )
        assert status.state == TerminatedState(exit_code=1)

    def test_default_state_is_unknown(self) -> None:
        assert isinstance(ContainerStatusInfo(name="app").state, UnknownState)

    def test_negative_restart_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContainerStatusInfo(name="app", restart_count=-1)

    def test_frozen(self) -> None:
        status = ContainerStatusInfo(name="app")
        with pytest.raises(ValidationError):
            status.name = "other"


class TestUnrecognizedContainerState:
    """Tests for diagnostic descriptions."""

    def test_describe_with_pod(self) -> None:
        diagnostic = UnrecognizedContainerState(
            container_name="app", keys=("crashed",), pod_name="web-1", namespace="default"
        )
        assert diagnostic.describe() == (
            "Unrecognized container state for default/web-1/app (keys: crashed)"
        )

    def test_describe_without_keys(self) -> None:
        diagnostic = UnrecognizedContainerState(container_name="app")
        assert diagnostic.describe().endswith("app (keys: <empty>)")
