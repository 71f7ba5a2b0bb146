"""Navigation index from displayed pod names back to raw pod records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class PodNotFoundError(KeyError):
    """Raised when a displayed pod is no longer in the current snapshot."""

    def __init__(self, pod_name: str) -> None:
        super().__init__(pod_name)
        self.pod_name = pod_name

    def __str__(self) -> str:
        return f"Pod {self.pod_name} not found; it may have been deleted"


class PodNavigationIndex:
    """Read-only view over one snapshot, keyed by pod name.

    The mapping is referenced, not copied. Build a new index for every
    render cycle; an index from an older cycle describes stale data.
    """

    def __init__(self, pods: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._pods: Mapping[str, Mapping[str, Any]] = pods if pods is not None else {}

    def resolve(self, pod_name: str) -> Mapping[str, Any]:
        """Return the raw pod for ``pod_name``.

        Raises:
            PodNotFoundError: The pod is absent from the snapshot.
        """
        try:
            return self._pods[pod_name]
        except KeyError:
            raise PodNotFoundError(pod_name) from None

    def __contains__(self, pod_name: object) -> bool:
        return pod_name in self._pods

    def __len__(self) -> int:
        return len(self._pods)
