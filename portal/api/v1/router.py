"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from portal.api.v1.dependencies.
"""

from fastapi import APIRouter

from portal.api.v1.endpoints import catalog, health, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(catalog.router, tags=["catalog"])
