"""Diagnostic events raised while deriving the pods view."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnrecognizedContainerState:
    """A container status whose state matched none of the known shapes."""

    container_name: str
    keys: tuple[str, ...] = ()
    pod_name: str | None = None
    namespace: str | None = None

    def describe(self) -> str:
        """Return a one-line description for logs and notifications."""
        where = self.container_name
        if self.pod_name:
            where = f"{self.namespace or '-'}/{self.pod_name}/{self.container_name}"
        observed = ", ".join(self.keys) if self.keys else "<empty>"
        return f"Unrecognized container state for {where} (keys: {observed})"
