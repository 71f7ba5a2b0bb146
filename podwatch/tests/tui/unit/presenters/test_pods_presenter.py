"""Tests for PodsPresenter."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from podwatch.constants.enums import ViewMode
from podwatch.controllers import PodsController
from podwatch.screens.pods.navigation import PodNotFoundError
from podwatch.screens.pods.presenter import (
    PodsDataLoaded,
    PodsDataLoadFailed,
    PodsPresenter,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _diagnostic_lines(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [
        record.getMessage()
        for record in caplog.records
        if "team-a/odd/app" in record.getMessage()
    ]


@pytest.fixture
def mock_screen() -> MagicMock:
    """Create a mock screen."""
    return MagicMock()


@pytest.fixture
def mock_controller() -> MagicMock:
    """Create a mock pods controller with one pod."""
    controller = MagicMock(spec=PodsController)
    controller.pods = {"web-1": {"metadata": {"name": "web-1"}}}
    controller.has_received_data = True
    controller.refresh = AsyncMock(return_value=controller.pods)
    return controller


@pytest.fixture
def presenter(mock_screen: MagicMock, mock_controller: MagicMock) -> PodsPresenter:
    """Create a PodsPresenter instance."""
    return PodsPresenter(mock_screen, mock_controller)


class TestRenderCycle:
    """Tests for render_cycle."""

    def test_builds_tree_and_index_from_snapshot(self, presenter: PodsPresenter) -> None:
        tree = presenter.render_cycle(NOW)

        assert tree.mode == ViewMode.PODS
        assert presenter.view_tree is tree
        assert presenter.resolve_pod("web-1") == {"metadata": {"name": "web-1"}}

    def test_loading_until_data_received(
        self, presenter: PodsPresenter, mock_controller: MagicMock
    ) -> None:
        mock_controller.has_received_data = False
        assert presenter.render_cycle(NOW).is_loading

    def test_explicit_snapshot_overrides_controller(
        self, presenter: PodsPresenter
    ) -> None:
        tree = presenter.render_cycle(NOW, pods={}, has_received_data=True)
        assert tree.is_empty
        with pytest.raises(PodNotFoundError):
            presenter.resolve_pod("web-1")

    def test_new_cycle_replaces_index(
        self, presenter: PodsPresenter, mock_controller: MagicMock
    ) -> None:
        presenter.render_cycle(NOW)
        mock_controller.pods = {"api-1": {"metadata": {"name": "api-1"}}}
        presenter.render_cycle(NOW)

        assert presenter.resolve_pod("api-1")["metadata"]["name"] == "api-1"
        with pytest.raises(PodNotFoundError):
            presenter.resolve_pod("web-1")


class TestDiagnosticLogging:
    """Tests for logging unrecognized container states."""

    @pytest.fixture
    def odd_pods(self) -> dict:
        """Snapshot with one container in an unrecognized state."""
        return {
            "odd": {
                "metadata": {"name": "odd", "namespace": "team-a"},
                "spec": {"containers": [{"name": "app"}]},
                "status": {
                    "containerStatuses": [{"name": "app", "state": {"crashed": {}}}]
                },
            }
        }

    def test_logged_once_while_unchanged(
        self,
        presenter: PodsPresenter,
        odd_pods: dict,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            for _ in range(3):
                presenter.render_cycle(NOW, pods=odd_pods, has_received_data=True)

        assert len(_diagnostic_lines(caplog)) == 1

    def test_logged_again_after_clearing(
        self,
        presenter: PodsPresenter,
        odd_pods: dict,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            presenter.render_cycle(NOW, pods=odd_pods, has_received_data=True)
            presenter.render_cycle(NOW, pods={}, has_received_data=True)
            presenter.render_cycle(NOW, pods=odd_pods, has_received_data=True)

        assert len(_diagnostic_lines(caplog)) == 2


class TestLoadData:
    """Tests for background refresh."""

    def test_starts_exclusive_worker(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        presenter.load_data()

        assert presenter.is_loading is True
        mock_screen.run_worker.assert_called_once()
        kwargs = mock_screen.run_worker.call_args.kwargs
        assert kwargs["exclusive"] is True
        assert kwargs["name"] == "pods-refresh"

    def test_tick_skipped_while_refresh_running(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        """A timer tick does not cancel a refresh that is still in flight."""
        presenter.load_data()
        presenter.load_data()

        assert mock_screen.run_worker.call_count == 1

    def test_forced_refresh_replaces_running_one(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        presenter.load_data()
        presenter.load_data(force=True)

        assert mock_screen.run_worker.call_count == 2

    @pytest.mark.asyncio
    async def test_next_tick_starts_after_completion(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        presenter.load_data()
        worker = MagicMock(is_cancelled=False)
        with patch(
            "podwatch.screens.pods.presenter.get_current_worker", return_value=worker
        ):
            await presenter._refresh_worker()
        presenter.load_data()

        assert mock_screen.run_worker.call_count == 2

    @pytest.mark.asyncio
    async def test_worker_posts_loaded(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        worker = MagicMock(is_cancelled=False)
        with patch(
            "podwatch.screens.pods.presenter.get_current_worker", return_value=worker
        ):
            await presenter._refresh_worker()

        message = mock_screen.post_message.call_args.args[0]
        assert isinstance(message, PodsDataLoaded)
        assert message.pod_count == 1
        assert presenter.is_loading is False
        assert presenter.error_message == ""

    @pytest.mark.asyncio
    async def test_worker_posts_failure(
        self,
        presenter: PodsPresenter,
        mock_screen: MagicMock,
        mock_controller: MagicMock,
    ) -> None:
        mock_controller.refresh.side_effect = RuntimeError("dial tcp: i/o timeout")
        worker = MagicMock(is_cancelled=False)
        with patch(
            "podwatch.screens.pods.presenter.get_current_worker", return_value=worker
        ):
            await presenter._refresh_worker()

        message = mock_screen.post_message.call_args.args[0]
        assert isinstance(message, PodsDataLoadFailed)
        assert message.error == "Connection timed out"
        assert presenter.error_message == "Connection timed out"

    @pytest.mark.asyncio
    async def test_cancelled_worker_posts_nothing(
        self, presenter: PodsPresenter, mock_screen: MagicMock
    ) -> None:
        worker = MagicMock(is_cancelled=True)
        with patch(
            "podwatch.screens.pods.presenter.get_current_worker", return_value=worker
        ):
            await presenter._refresh_worker()

        mock_screen.post_message.assert_not_called()


class TestFriendlyError:
    """Tests for error message shortening."""

    def test_long_message_truncated(self) -> None:
        message = PodsPresenter._friendly_error(RuntimeError("x" * 120))
        assert len(message) == 80
        assert message.endswith("...")

    def test_empty_message(self) -> None:
        assert PodsPresenter._friendly_error(RuntimeError()) == "Unknown error"
