"""View-tree builder for the pods screen.

Turns one pod snapshot into a render-ready ``ViewTree``. The builder is a
pure function of its inputs: the same snapshot, received flag and "now"
always produce the same tree, so the screen can diff and re-render freely.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from podwatch.constants.enums import ViewMode
from podwatch.constants.values import POD_JOB_NAME_LABEL_KEY, POD_NAME_LABEL_KEY
from podwatch.controllers.pods.classifiers import ContainerStateClassifier
from podwatch.controllers.pods.parsers import ContainerParser
from podwatch.models.core.container_info import ContainerSpecInfo, ContainerStatusInfo
from podwatch.models.core.diagnostics import UnrecognizedContainerState
from podwatch.models.core.pod_view import ContainerView, PodView, ViewTree
from podwatch.utils.time_utils import StructuredTime, format_started_ago, parse_timestamp

_container_parser = ContainerParser()
_default_classifier = ContainerStateClassifier()


def _coerce_now(now: datetime | StructuredTime | None) -> StructuredTime:
    if now is None:
        return StructuredTime.now()
    if isinstance(now, StructuredTime):
        return now
    return StructuredTime.from_datetime(now)


def ordered_pod_names(pods: Mapping[str, Mapping[str, Any]]) -> list[str]:
    """Pod identifiers sorted by pod name, independent of arrival order."""
    return sorted(
        pods,
        key=lambda pod_id: (str(pods[pod_id]["metadata"].get("name", pod_id)), pod_id),
    )


def _label_value(labels: Any, key: str) -> str | None:
    if not isinstance(labels, Mapping) or key not in labels:
        return None
    value = labels[key]
    return None if value is None else str(value)


def build_container_view(
    spec: ContainerSpecInfo,
    status: ContainerStatusInfo | None,
    now: StructuredTime,
    *,
    classifier: ContainerStateClassifier = _default_classifier,
) -> tuple[ContainerView, UnrecognizedContainerState | None]:
    """Build one container row and its diagnostic, if any."""
    classification = classifier.classify(spec, status)
    started_ago = None
    if classification.started_at:
        started_ago = format_started_ago(parse_timestamp(classification.started_at), now)
    view = ContainerView(
        name=spec.name,
        image=spec.image,
        restart_count=status.restart_count if status is not None else None,
        started_ago=started_ago,
        state_label=classification.label,
        state_severity=classification.severity,
    )
    return view, classification.diagnostic


def build_pod_view(
    pod: Mapping[str, Any],
    now: StructuredTime,
    *,
    classifier: ContainerStateClassifier = _default_classifier,
) -> tuple[PodView, list[UnrecognizedContainerState]]:
    """Build one pod node.

    Raises:
        KeyError: When the record has no ``metadata`` at all.
    """
    metadata = pod["metadata"]
    labels = metadata.get("labels")
    name = str(metadata.get("name", ""))
    namespace = metadata.get("namespace")

    containers: list[ContainerView] = []
    diagnostics: list[UnrecognizedContainerState] = []
    for spec, status in _container_parser.parse_pairs(pod):
        view, diagnostic = build_container_view(spec, status, now, classifier=classifier)
        containers.append(view)
        if diagnostic is not None:
            diagnostic = UnrecognizedContainerState(
                container_name=diagnostic.container_name,
                keys=diagnostic.keys,
                pod_name=name,
                namespace=namespace,
            )
            diagnostics.append(diagnostic)

    pod_view = PodView(
        name=name,
        name_label=_label_value(labels, POD_NAME_LABEL_KEY),
        job_name_label=_label_value(labels, POD_JOB_NAME_LABEL_KEY),
        namespace=None if namespace is None else str(namespace),
        containers=tuple(containers),
    )
    return pod_view, diagnostics


def build_view_tree(
    pods: Mapping[str, Mapping[str, Any]],
    has_received_data: bool,
    now: datetime | StructuredTime | None = None,
    *,
    classifier: ContainerStateClassifier | None = None,
) -> ViewTree:
    """Build the pods view tree for one render cycle.

    Args:
        pods: Snapshot mapping pod name to raw pod record.
        has_received_data: Whether a first successful fetch has happened.
        now: Instant used for every elapsed-time label in this cycle;
            read from the clock once when omitted.
        classifier: Optional classifier override.

    Returns:
        A loading tree until data has been received, an empty tree for an
        empty snapshot, otherwise pods ordered by name.
    """
    if not has_received_data:
        return ViewTree(mode=ViewMode.LOADING)
    if not pods:
        return ViewTree(mode=ViewMode.EMPTY)

    current = _coerce_now(now)
    active_classifier = classifier or _default_classifier
    pod_views: list[PodView] = []
    diagnostics: list[UnrecognizedContainerState] = []
    for pod_id in ordered_pod_names(pods):
        pod_view, pod_diagnostics = build_pod_view(
            pods[pod_id], current, classifier=active_classifier
        )
        pod_views.append(pod_view)
        diagnostics.extend(pod_diagnostics)

    return ViewTree(
        mode=ViewMode.PODS,
        pods=tuple(pod_views),
        diagnostics=tuple(diagnostics),
    )
