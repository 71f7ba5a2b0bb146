"""Fetchers for the pods domain."""

from podwatch.controllers.pods.fetchers.pod_fetcher import PodFetcher

__all__ = ["PodFetcher"]
