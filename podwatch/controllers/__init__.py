"""Controllers module for PodWatch TUI.

This module provides controllers for fetching Kubernetes pod data and
deriving container state from it.
"""

from __future__ import annotations

# Base classes
from podwatch.controllers.base import BaseController

# Pods domain
from podwatch.controllers.pods import (
    ContainerParser,
    ContainerStateClassifier,
    FetchStatus,
    PodFetcher,
    PodsController,
)

__all__ = [
    # Base
    "BaseController",
    # Pods domain
    "ContainerParser",
    "ContainerStateClassifier",
    "FetchStatus",
    "PodFetcher",
    "PodsController",
]
