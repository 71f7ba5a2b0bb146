"""Tests for container spec/status parsing and matching."""

from __future__ import annotations

import logging

import pytest

from podwatch.controllers.pods.parsers.container_parser import (
    ContainerParser,
    match_container_statuses,
    parse_container_state,
)
from podwatch.models.core.container_info import (
    ContainerSpecInfo,
    ContainerStatusInfo,
    RunningState,
    TerminatedState,
    UnknownState,
    WaitingState,
)


@pytest.fixture
def parser() -> ContainerParser:
    """Create a ContainerParser instance."""
    return ContainerParser()


class TestParseContainerState:
    """Tests for parse_container_state."""

    def test_running(self) -> None:
        state = parse_container_state({"running": {"startedAt": "2024-01-01T00:00:00Z"}})
        assert state == RunningState(started_at="2024-01-01T00:00:00Z")

    def test_terminated(self) -> None:
        state = parse_container_state(
            {"terminated": {"exitCode": 137, "reason": "OOMKilled"}}
        )
        assert isinstance(state, TerminatedState)
        assert state.exit_code == 137
        assert state.reason == "OOMKilled"

    def test_waiting_without_started_at(self) -> None:
        state = parse_container_state({"waiting": {"reason": "ImagePullBackOff"}})
        assert state == WaitingState(reason="ImagePullBackOff")

    def test_running_wins_over_other_keys(self) -> None:
        """Running takes precedence over terminated and waiting."""
        state = parse_container_state(
            {
                "waiting": {"reason": "ContainerCreating"},
                "terminated": {"exitCode": 1},
                "running": {},
            }
        )
        assert isinstance(state, RunningState)

    def test_terminated_wins_over_waiting(self) -> None:
        state = parse_container_state(
            {"waiting": {"reason": "CrashLoopBackOff"}, "terminated": {"exitCode": 0}}
        )
        assert isinstance(state, TerminatedState)

    def test_unrecognized_keys_are_kept(self) -> None:
        state = parse_container_state({"paused": {}, "crashed": {}})
        assert state == UnknownState(keys=("crashed", "paused"))

    @pytest.mark.parametrize("raw", [None, {}, "running", []])
    def test_empty_or_malformed_is_unknown(self, raw: object) -> None:
        assert isinstance(parse_container_state(raw), UnknownState)

    def test_non_numeric_exit_code_is_none(self) -> None:
        state = parse_container_state({"terminated": {"exitCode": "boom"}})
        assert isinstance(state, TerminatedState)
        assert state.exit_code is None


class TestMatchContainerStatuses:
    """Tests for pairing specs with statuses by name."""

    def test_preserves_spec_order(self) -> None:
        """Output follows declaration order, not status order."""
        specs = [ContainerSpecInfo(name="b"), ContainerSpecInfo(name="a")]
        statuses = [ContainerStatusInfo(name="a"), ContainerStatusInfo(name="b")]

        pairs = match_container_statuses(specs, statuses)

        assert [spec.name for spec, _ in pairs] == ["b", "a"]
        assert [status.name for _, status in pairs if status] == ["b", "a"]

    def test_missing_status_is_none(self) -> None:
        specs = [ContainerSpecInfo(name="app"), ContainerSpecInfo(name="sidecar")]
        pairs = match_container_statuses(specs, [ContainerStatusInfo(name="app")])
        assert pairs[1] == (specs[1], None)

    def test_first_status_with_equal_name_wins(self) -> None:
        specs = [ContainerSpecInfo(name="app")]
        first = ContainerStatusInfo(name="app", restart_count=1)
        second = ContainerStatusInfo(name="app", restart_count=9)

        pairs = match_container_statuses(specs, [first, second])

        assert pairs == [(specs[0], first)]

    def test_orphan_statuses_are_dropped(self) -> None:
        specs = [ContainerSpecInfo(name="app")]
        pairs = match_container_statuses(
            specs, [ContainerStatusInfo(name="ghost"), ContainerStatusInfo(name="app")]
        )
        assert len(pairs) == 1
        assert pairs[0][1] is not None
        assert pairs[0][1].name == "app"


class TestContainerParser:
    """Tests for ContainerParser."""

    def test_parse_status_clamps_restart_count(self, parser: ContainerParser) -> None:
        status = parser.parse_status({"name": "app", "restartCount": -3})
        assert status.restart_count == 0

    def test_parse_status_without_state(self, parser: ContainerParser) -> None:
        status = parser.parse_status({"name": "app", "restartCount": 2})
        assert status.restart_count == 2
        assert isinstance(status.state, UnknownState)

    def test_parse_spec_defaults_image(self, parser: ContainerParser) -> None:
        assert parser.parse_spec({"name": "app"}) == ContainerSpecInfo(name="app", image="")

    def test_parse_pairs_pod_without_status(self, parser: ContainerParser) -> None:
        pod = {"spec": {"containers": [{"name": "app", "image": "nginx"}]}}
        assert parser.parse_pairs(pod) == [
            (ContainerSpecInfo(name="app", image="nginx"), None)
        ]

    def test_parse_pairs_zero_containers(self, parser: ContainerParser) -> None:
        assert parser.parse_pairs({"spec": {}, "status": {}}) == []

    def test_parse_pairs_logs_dropped_statuses(
        self, parser: ContainerParser, caplog: pytest.LogCaptureFixture
    ) -> None:
        pod = {
            "spec": {"containers": [{"name": "app"}]},
            "status": {
                "containerStatuses": [
                    {"name": "app", "state": {"running": {}}},
                    {"name": "ghost", "state": {"running": {}}},
                ]
            },
        }
        with caplog.at_level(logging.DEBUG):
            pairs = parser.parse_pairs(pod)

        assert [spec.name for spec, _ in pairs] == ["app"]
        assert "ghost" in caplog.text
