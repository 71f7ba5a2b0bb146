"""Utility functions and classes for PodWatch TUI."""

from podwatch.utils.time_utils import (
    StructuredTime,
    elapsed_since,
    format_started_ago,
    parse_timestamp,
)

__all__ = [
    # Time
    "StructuredTime",
    "elapsed_since",
    "format_started_ago",
    "parse_timestamp",
]
