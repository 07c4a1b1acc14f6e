"""Catalog dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal.application.use_cases.catalog import CatalogService
from portal.infrastructure.persistence.database import get_db
from portal.infrastructure.persistence.repositories import CatalogRepository


async def get_catalog_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CatalogRepository:
    """Catalog repository for breadcrumb lookups (read-only)."""
    return CatalogRepository(db)


async def get_catalog_service(
    catalog_repo: Annotated[CatalogRepository, Depends(get_catalog_repo)],
) -> CatalogService:
    """Breadcrumb use case."""
    return CatalogService(catalog_repo)
