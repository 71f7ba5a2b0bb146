"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Cluster scope
# ============================================================================

NAMESPACE_DEFAULT: Final = "default"

# ============================================================================
# UI defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 5

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = "~/.cache/podwatch/podwatch.log"

# ============================================================================
# Settings file
# ============================================================================

SETTINGS_PATH_DEFAULT: Final = "~/.config/podwatch/settings.yaml"

__all__ = [
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SETTINGS_PATH_DEFAULT",
]
