"""Timestamp utilities for Kubernetes API time strings.

Kubernetes reports container start times as RFC 3339 strings such as
``2024-01-01T00:00:00Z`` or ``2024-01-01T00:00:00.123456+00:00``. The
helpers here turn them into a ``StructuredTime`` and render the elapsed
time relative to "now" using only the coarsest non-zero unit:

- ``90061`` seconds -> ``"1d"``
- ``5400`` seconds -> ``"1h"``
- ``42`` seconds -> ``"42s"``

Parsing is total: any field that cannot be resolved is left at ``0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from podwatch.constants.limits import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_YEAR,
)
from podwatch.constants.values import ELAPSED_SUFFIX

# Pre-compiled patterns for the normalized form ("2024-01-01 000000 +0000").
_DATE_RE = re.compile(r"(?P<year>\d{1,4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})")
_TIME_RE = re.compile(
    r"(?P<hour>\d{2})(?P<minute>\d{2})?(?P<second>\d{2})?(?:[.,]\d*)?"
    r"(?P<zone>Z|[+-]\d{2}(?:\d{2})?)?",
    re.IGNORECASE,
)
_ZONE_RE = re.compile(
    r"(?P<utc>Z|UTC|GMT)|(?P<sign>[+-])(?P<hours>\d{2})(?P<minutes>\d{2})?",
    re.IGNORECASE,
)

# Coarsest first; the first unit the duration reaches wins.
_ELAPSED_UNITS: tuple[tuple[int, str], ...] = (
    (SECONDS_PER_YEAR, "y"),
    (SECONDS_PER_DAY, "d"),
    (SECONDS_PER_HOUR, "h"),
    (SECONDS_PER_MINUTE, "m"),
)


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date.

    Out-of-range months and days roll over instead of raising, so zeroed
    fields from a malformed timestamp still produce a number.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


@dataclass(frozen=True)
class StructuredTime:
    """Calendar fields of an instant plus its UTC offset."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    utc_offset_seconds: int = 0

    @classmethod
    def from_datetime(cls, value: datetime) -> StructuredTime:
        """Build from a datetime; naive values are taken as UTC."""
        offset = value.utcoffset()
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            utc_offset_seconds=int(offset.total_seconds()) if offset else 0,
        )

    @classmethod
    def now(cls) -> StructuredTime:
        return cls.from_datetime(datetime.now(timezone.utc))

    def to_epoch_seconds(self) -> int:
        """Seconds since the Unix epoch; never raises."""
        days = _days_from_civil(self.year, self.month, self.day)
        return (
            days * SECONDS_PER_DAY
            + self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
            - self.utc_offset_seconds
        )


def normalize_timestamp(timestamp: str) -> str:
    """Strip colons, split date from time and separate a ``+`` zone offset."""
    normalized = timestamp.replace(":", "")
    normalized = normalized.replace("T", " ")
    return normalized.replace("+", " +")


def _parse_zone(token: str) -> int | None:
    match = _ZONE_RE.fullmatch(token)
    if match is None:
        return None
    if match.group("utc"):
        return 0
    seconds = int(match.group("hours")) * SECONDS_PER_HOUR
    seconds += int(match.group("minutes") or 0) * SECONDS_PER_MINUTE
    return -seconds if match.group("sign") == "-" else seconds


def parse_timestamp(timestamp: Any) -> StructuredTime:
    """Parse an API timestamp into a StructuredTime.

    Args:
        timestamp: Timestamp string as reported by the API server.

    Returns:
        StructuredTime with every unresolved field set to 0. Zone-naive
        input is treated as UTC.
    """
    if not isinstance(timestamp, str) or not timestamp:
        return StructuredTime()

    fields: dict[str, int] = {}
    for token in normalize_timestamp(timestamp.strip()).split():
        if "year" not in fields:
            date_match = _DATE_RE.fullmatch(token)
            if date_match is not None:
                fields["year"] = int(date_match.group("year"))
                fields["month"] = int(date_match.group("month"))
                fields["day"] = int(date_match.group("day"))
                continue
        if "hour" not in fields:
            time_match = _TIME_RE.fullmatch(token)
            if time_match is not None:
                fields["hour"] = int(time_match.group("hour"))
                fields["minute"] = int(time_match.group("minute") or 0)
                fields["second"] = int(time_match.group("second") or 0)
                zone = time_match.group("zone")
                if zone:
                    offset = _parse_zone(zone)
                    if offset is not None:
                        fields["utc_offset_seconds"] = offset
                continue
        offset = _parse_zone(token)
        if offset is not None:
            fields["utc_offset_seconds"] = offset

    return StructuredTime(**fields)


def elapsed_seconds(start: StructuredTime, now: StructuredTime) -> int:
    """Whole seconds from ``start`` to ``now`` (negative if start is later)."""
    return now.to_epoch_seconds() - start.to_epoch_seconds()


def elapsed_since(start: StructuredTime, now: StructuredTime) -> str:
    """Render the elapsed time with the coarsest non-zero unit, e.g. ``"2d"``.

    Durations of zero or less (clock skew) render as ``"0s"``.
    """
    seconds = max(0, elapsed_seconds(start, now))
    for unit_seconds, suffix in _ELAPSED_UNITS:
        if seconds >= unit_seconds:
            return f"{seconds // unit_seconds}{suffix}"
    return f"{seconds}s"


def format_started_ago(start: StructuredTime, now: StructuredTime) -> str:
    """Elapsed time label used in the tree, e.g. ``"1h ago"``."""
    return f"{elapsed_since(start, now)}{ELAPSED_SUFFIX}"


__all__ = [
    "StructuredTime",
    "elapsed_seconds",
    "elapsed_since",
    "format_started_ago",
    "normalize_timestamp",
    "parse_timestamp",
]
