"""Render-ready pod view models."""

from pydantic import BaseModel, ConfigDict

from podwatch.constants.enums import StateSeverity, ViewMode
from podwatch.constants.values import PODS_TREE_TITLE
from podwatch.models.core.diagnostics import UnrecognizedContainerState


class ContainerView(BaseModel):
    """One container row under a pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str = ""
    restart_count: int | None = None
    started_ago: str | None = None
    state_label: str
    state_severity: StateSeverity


class PodView(BaseModel):
    """One pod node with its containers in spec order."""

    model_config = ConfigDict(frozen=True)

    name: str
    name_label: str | None = None
    job_name_label: str | None = None
    namespace: str | None = None
    containers: tuple[ContainerView, ...] = ()


class ViewTree(BaseModel):
    """Root "Pods" node: a loading leaf, an empty leaf, or ordered pods."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str = PODS_TREE_TITLE
    mode: ViewMode
    pods: tuple[PodView, ...] = ()
    diagnostics: tuple[UnrecognizedContainerState, ...] = ()

    @property
    def is_loading(self) -> bool:
        return self.mode is ViewMode.LOADING

    @property
    def is_empty(self) -> bool:
        return self.mode is ViewMode.EMPTY

    @property
    def pod_names(self) -> list[str]:
        return [pod.name for pod in self.pods]
