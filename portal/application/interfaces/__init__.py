"""Application ports (protocols implemented by infrastructure)."""

from portal.application.interfaces.repositories import (
    ICatalogRepository,
    ISearchRepository,
)

__all__ = ["ICatalogRepository", "ISearchRepository"]
