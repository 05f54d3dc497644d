"""Routing - resource kinds, route entries, and the path classifier.

The classifier is shared verbatim by the build-time exporter and the runtime
fallback, so both always agree on what a path means.
"""

from plowfinder.routing.classifier import Classifier, split_path
from plowfinder.routing.route import (
    EXPORT_PRIORITY,
    NOT_FOUND,
    RESERVED_SLUGS,
    ResourceKind,
    Resolution,
    RouteEntry,
    StaticPage,
)

__all__ = [
    "EXPORT_PRIORITY",
    "NOT_FOUND",
    "RESERVED_SLUGS",
    "Classifier",
    "ResourceKind",
    "Resolution",
    "RouteEntry",
    "StaticPage",
    "split_path",
]
