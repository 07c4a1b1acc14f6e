"""Application services: search query normalization, links, source registry, fan-out."""

from portal.application.services.search_fan_out import SearchFanOut
from portal.application.services.search_links import slugify
from portal.application.services.search_query import normalize_query, parse_limit
from portal.application.services.search_sources import (
    SOURCE_REGISTRY,
    SourceDescriptor,
)

__all__ = [
    "SOURCE_REGISTRY",
    "SearchFanOut",
    "SourceDescriptor",
    "normalize_query",
    "parse_limit",
    "slugify",
]
