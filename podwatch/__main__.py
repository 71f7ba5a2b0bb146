"""Command line entry point: ``podwatch`` / ``python -m podwatch``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from podwatch.constants.defaults import NAMESPACE_DEFAULT
from podwatch.constants.limits import REFRESH_INTERVAL_MAX, REFRESH_INTERVAL_MIN
from podwatch.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podwatch",
        description="Live pod and container status tree for a Kubernetes cluster",
    )
    parser.add_argument("--context", help="kubectl context to use")
    parser.add_argument(
        "-n",
        "--namespace",
        help=f"Namespace to watch (default: {NAMESPACE_DEFAULT})",
    )
    parser.add_argument(
        "--refresh-interval",
        type=int,
        help=f"Seconds between refreshes ({REFRESH_INTERVAL_MIN}-{REFRESH_INTERVAL_MAX})",
    )
    parser.add_argument("--config", type=Path, help="Path to settings YAML")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    parser.add_argument("--log-file", help="Log file path (the TUI owns the terminal)")
    return parser


def resolve_settings(args: argparse.Namespace) -> AppSettings:
    """Load file settings and apply CLI overrides."""
    try:
        settings = ConfigManager.load(args.config)
    except ConfigLoadError as exc:
        logger.warning("Falling back to default settings: %s", exc)
        settings = AppSettings()

    overrides = {
        "context": args.context,
        "namespace": args.namespace,
        "refresh_interval": args.refresh_interval,
        "log_level": args.log_level,
        "log_file": args.log_file,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)
    return settings


def configure_logging(settings: AppSettings) -> None:
    log_path = Path(settings.log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as exc:
        parser.error(str(exc))
    configure_logging(settings)

    from podwatch.app import PodWatchApp

    logger.info(
        "Starting PodWatch (context=%s, namespace=%s)",
        settings.context or "current",
        settings.namespace,
    )
    PodWatchApp(settings=settings, config_path=args.config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
