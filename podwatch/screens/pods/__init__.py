"""Pods screen module exports."""

from podwatch.screens.pods.navigation import PodNavigationIndex, PodNotFoundError
from podwatch.screens.pods.pods_screen import PodsScreen, TreeNodeRef
from podwatch.screens.pods.presenter import (
    PodsDataLoaded,
    PodsDataLoadFailed,
    PodsPresenter,
)
from podwatch.screens.pods.view_tree import build_view_tree

__all__ = [
    "PodNavigationIndex",
    "PodNotFoundError",
    "PodsDataLoadFailed",
    "PodsDataLoaded",
    "PodsPresenter",
    "PodsScreen",
    "TreeNodeRef",
    "build_view_tree",
]
