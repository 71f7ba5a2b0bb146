"""Tests for pods tree label helpers."""

from __future__ import annotations

from podwatch.constants.enums import StateSeverity
from podwatch.models.core.pod_view import ContainerView, PodView
from podwatch.screens.pods.pods_screen import (
    container_fields,
    container_label,
    pod_fields,
    pod_label,
    state_text,
)


def _container(**overrides) -> ContainerView:
    values = {
        "name": "app",
        "image": "nginx:1.0",
        "restart_count": 2,
        "started_ago": "1h ago",
        "state_label": "Running",
        "state_severity": StateSeverity.SUCCESS,
    }
    values.update(overrides)
    return ContainerView(**values)


class TestContainerLabels:
    """Tests for container labels and fields."""

    def test_state_text_uses_severity_style(self) -> None:
        text = state_text(_container(state_label="OOMKilled", state_severity=StateSeverity.ERROR))
        assert text.plain == "OOMKilled"
        assert str(text.style) == "red"

    def test_container_label(self) -> None:
        assert container_label(_container()).plain == "app  Running"

    def test_all_fields(self) -> None:
        lines = [line.plain for line in container_fields(_container())]
        assert lines == [
            "Image: nginx:1.0",
            "Restarts: 2",
            "Started: 1h ago",
            "State: Running",
        ]

    def test_pending_container_omits_restarts_and_started(self) -> None:
        container = _container(
            restart_count=None,
            started_ago=None,
            state_label="Pending",
            state_severity=StateSeverity.NEUTRAL,
        )
        lines = [line.plain for line in container_fields(container)]
        assert lines == ["Image: nginx:1.0", "State: Pending"]


class TestPodLabels:
    """Tests for pod labels and fields."""

    def test_pod_label(self) -> None:
        assert pod_label(PodView(name="web-1")).plain == "web-1"

    def test_pod_fields_with_labels(self) -> None:
        pod = PodView(name="web-1", name_label="web", job_name_label="nightly", namespace="default")
        assert [line.plain for line in pod_fields(pod)] == [
            "Name: web",
            "Job Name: nightly",
            "Namespace: default",
        ]

    def test_pod_fields_without_labels(self) -> None:
        pod = PodView(name="web-1")
        assert [line.plain for line in pod_fields(pod)] == ["Namespace: -"]
