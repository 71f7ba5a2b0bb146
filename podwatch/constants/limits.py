"""Limit constants for the TUI.

All max/min values used for validation.
"""

from typing import Final

# ============================================================================
# Refresh limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
REFRESH_INTERVAL_MAX: Final = 3600

# ============================================================================
# Elapsed time units (seconds), coarsest first
# ============================================================================

SECONDS_PER_MINUTE: Final = 60
SECONDS_PER_HOUR: Final = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final = 24 * SECONDS_PER_HOUR
SECONDS_PER_YEAR: Final = 365 * SECONDS_PER_DAY

__all__ = [
    "REFRESH_INTERVAL_MAX",
    "REFRESH_INTERVAL_MIN",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_YEAR",
]
