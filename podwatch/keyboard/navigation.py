"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# Pods Screen Bindings
# ============================================================================

PODS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("d", "show_details", "Details"),
]

# ============================================================================
# Pod Detail Screen Bindings
# ============================================================================

POD_DETAIL_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "dismiss_detail", "Close"),
]

__all__ = [
    "POD_DETAIL_SCREEN_BINDINGS",
    "PODS_SCREEN_BINDINGS",
]
