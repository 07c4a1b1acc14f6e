"""Application use cases."""

from portal.application.use_cases.catalog import CatalogService
from portal.application.use_cases.search import SearchService

__all__ = ["CatalogService", "SearchService"]
