"""Init file for pods module."""

from podwatch.controllers.pods.classifiers import ContainerStateClassifier
from podwatch.controllers.pods.controller import FetchStatus, PodsController
from podwatch.controllers.pods.fetchers import PodFetcher
from podwatch.controllers.pods.parsers import ContainerParser

__all__ = [
    "ContainerParser",
    "ContainerStateClassifier",
    "FetchStatus",
    "PodFetcher",
    "PodsController",
]
