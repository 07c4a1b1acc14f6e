"""Repository implementations (infrastructure adapters for application ports)."""

from portal.infrastructure.persistence.repositories.base import BaseRepository
from portal.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from portal.infrastructure.persistence.repositories.search_repo import SearchRepository

__all__ = ["BaseRepository", "CatalogRepository", "SearchRepository"]
