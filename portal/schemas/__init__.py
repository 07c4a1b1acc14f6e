"""Pydantic request/response schemas for the HTTP API."""

from portal.schemas.catalog import BreadcrumbResponse
from portal.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from portal.schemas.search import (
    SearchErrorResponse,
    SearchResponse,
    SearchResultItemResponse,
)

__all__ = [
    "BreadcrumbResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchErrorResponse",
    "SearchResponse",
    "SearchResultItemResponse",
]
