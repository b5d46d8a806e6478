"""Directory emulation over flat object listings."""

from .path_filter import (
    PathListingFilter,
    build_query,
    filter_objects,
    matches,
    normalize_attributes,
)

__all__ = [
    "PathListingFilter",
    "build_query",
    "filter_objects",
    "matches",
    "normalize_attributes",
]
