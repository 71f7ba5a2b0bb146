"""Tests for command line parsing and settings overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from podwatch.__main__ import build_parser, resolve_settings


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Settings file with a namespace and interval."""
    path = tmp_path / "settings.yaml"
    path.write_text("namespace: team-a\nrefresh_interval: 10\n", encoding="utf-8")
    return path


class TestResolveSettings:
    """Tests for resolve_settings."""

    def test_file_values_without_overrides(self, config_file: Path) -> None:
        args = build_parser().parse_args(["--config", str(config_file)])
        settings = resolve_settings(args)
        assert settings.namespace == "team-a"
        assert settings.refresh_interval == 10

    def test_cli_overrides_file(self, config_file: Path) -> None:
        args = build_parser().parse_args(
            [
                "--config",
                str(config_file),
                "-n",
                "prod",
                "--refresh-interval",
                "2",
                "--log-level",
                "debug",
            ]
        )
        settings = resolve_settings(args)
        assert settings.namespace == "prod"
        assert settings.refresh_interval == 2
        assert settings.log_level == "DEBUG"

    def test_broken_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- not a mapping\n", encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path), "--context", "kind"])
        settings = resolve_settings(args)
        assert settings.context == "kind"
        assert settings.namespace == "default"

    def test_invalid_override_raises(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            ["--config", str(tmp_path / "none.yaml"), "--refresh-interval", "0"]
        )
        with pytest.raises(ValidationError):
            resolve_settings(args)

    def test_empty_namespace_override_raises(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            ["--config", str(tmp_path / "none.yaml"), "--namespace", ""]
        )
        with pytest.raises(ValidationError):
            resolve_settings(args)
