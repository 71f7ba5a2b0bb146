"""Detail screen module exports."""

from podwatch.screens.detail.pod_detail_screen import PodDetailScreen, pod_to_yaml

__all__ = ["PodDetailScreen", "pod_to_yaml"]
