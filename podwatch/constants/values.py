"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "PodWatch"

# ============================================================================
# Pods tree
# ============================================================================

PODS_TREE_TITLE: Final = "Pods"
PODS_LOADING_LABEL: Final = "Fetching pods..."
PODS_EMPTY_LABEL: Final = "None."
CONTAINERS_SECTION_LABEL: Final = "Containers"

# ============================================================================
# Container state labels
# ============================================================================

STATE_LABEL_PENDING: Final = "Pending"
STATE_LABEL_RUNNING: Final = "Running"
STATE_LABEL_UNKNOWN: Final = "Warn"
STATE_LABEL_TERMINATED_FALLBACK: Final = "Terminated"
STATE_LABEL_WAITING_FALLBACK: Final = "Waiting"

# ============================================================================
# Pod labels surfaced in the tree
# ============================================================================

POD_NAME_LABEL_KEY: Final = "name"
POD_JOB_NAME_LABEL_KEY: Final = "job-name"

ELAPSED_SUFFIX: Final = " ago"

__all__ = [
    "APP_TITLE",
    "CONTAINERS_SECTION_LABEL",
    "ELAPSED_SUFFIX",
    "PODS_EMPTY_LABEL",
    "PODS_LOADING_LABEL",
    "PODS_TREE_TITLE",
    "POD_JOB_NAME_LABEL_KEY",
    "POD_NAME_LABEL_KEY",
    "STATE_LABEL_PENDING",
    "STATE_LABEL_RUNNING",
    "STATE_LABEL_TERMINATED_FALLBACK",
    "STATE_LABEL_UNKNOWN",
    "STATE_LABEL_WAITING_FALLBACK",
]
