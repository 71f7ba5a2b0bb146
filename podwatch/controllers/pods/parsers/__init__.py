"""Parsers for the pods domain."""

from podwatch.controllers.pods.parsers.container_parser import (
    ContainerParser,
    match_container_statuses,
    parse_container_state,
)

__all__ = ["ContainerParser", "match_container_statuses", "parse_container_state"]
