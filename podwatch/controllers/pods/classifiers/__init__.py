"""Classifiers for the pods domain."""

from podwatch.controllers.pods.classifiers.state_classifier import (
    ContainerClassification,
    ContainerStateClassifier,
    resolve_started_at,
)

__all__ = ["ContainerClassification", "ContainerStateClassifier", "resolve_started_at"]
