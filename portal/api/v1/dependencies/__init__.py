"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for application use cases. Use cases are built
from infrastructure implementations here; routes depend only on these.
"""

from portal.api.v1.dependencies.catalog import get_catalog_repo, get_catalog_service
from portal.api.v1.dependencies.search import get_search_repo, get_search_service

__all__ = [
    "get_catalog_repo",
    "get_catalog_service",
    "get_search_repo",
    "get_search_service",
]
