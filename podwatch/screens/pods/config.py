"""Pods screen configuration: widget ids, worker names, label styles."""

from typing import Final

from podwatch.constants.enums import StateSeverity

# ============================================================================
# Widget ids
# ============================================================================

PODS_TREE_ID: Final = "pods-tree"
PODS_STATUS_ID: Final = "pods-status"

# ============================================================================
# Workers and timers
# ============================================================================

PODS_REFRESH_WORKER_NAME: Final = "pods-refresh"

# ============================================================================
# Styles
# ============================================================================

SEVERITY_STYLES: Final[dict[StateSeverity, str]] = {
    StateSeverity.NEUTRAL: "dim",
    StateSeverity.SUCCESS: "green",
    StateSeverity.ERROR: "red",
    StateSeverity.WARNING: "yellow",
}

POD_NAME_STYLE: Final = "bold"
FIELD_NAME_STYLE: Final = "bold"
PLACEHOLDER_STYLE: Final = "dim italic"

# ============================================================================
# Status line
# ============================================================================

STATUS_WAITING: Final = "Waiting for first response from cluster..."
STATUS_UPDATED: Final = "{count} pods, updated {updated}"
STATUS_FAILED: Final = "Refresh failed: {error}"

__all__ = [
    "FIELD_NAME_STYLE",
    "PLACEHOLDER_STYLE",
    "PODS_REFRESH_WORKER_NAME",
    "PODS_STATUS_ID",
    "PODS_TREE_ID",
    "POD_NAME_STYLE",
    "SEVERITY_STYLES",
    "STATUS_FAILED",
    "STATUS_UPDATED",
    "STATUS_WAITING",
]
