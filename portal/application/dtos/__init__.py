"""Application DTOs (read-models with no dependency on the ORM)."""

from portal.application.dtos.catalog import BreadcrumbResult
from portal.application.dtos.search import SearchQuery, SearchResultItem, SearchResults

__all__ = [
    "BreadcrumbResult",
    "SearchQuery",
    "SearchResultItem",
    "SearchResults",
]
