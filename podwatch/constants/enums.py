"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Container State Enums
# =============================================================================

class StateSeverity(Enum):
    """Display emphasis for a classified container state."""

    NEUTRAL = "neutral"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class ContainerLifecycle(Enum):
    """Lifecycle bucket a container status resolves to."""

    PENDING = "pending"
    RUNNING = "running"
    TERMINATED = "terminated"
    WAITING = "waiting"
    UNKNOWN = "unknown"


# =============================================================================
# View Tree Enums
# =============================================================================

class ViewMode(Enum):
    """Top-level display mode of the pods tree."""

    LOADING = "loading"
    EMPTY = "empty"
    PODS = "pods"


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "ContainerLifecycle",
    "FetchState",
    "StateSeverity",
    "ViewMode",
]
