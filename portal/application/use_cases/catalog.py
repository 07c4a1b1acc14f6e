"""Catalog lookups for breadcrumb labels. Delegates to ICatalogRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.application.dtos.catalog import BreadcrumbResult
from portal.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import ICatalogRepository


class CatalogService:
    """Resolve product and subcategory ids to their display names."""

    def __init__(self, catalog_repo: "ICatalogRepository") -> None:
        self.catalog_repo = catalog_repo

    async def get_product_breadcrumb(self, product_id: str) -> BreadcrumbResult:
        result = await self.catalog_repo.get_product_breadcrumb(product_id)
        if result is None:
            raise ResourceNotFoundException("product", product_id)
        return result

    async def get_subcategory_breadcrumb(self, subcategory_id: str) -> BreadcrumbResult:
        result = await self.catalog_repo.get_subcategory_breadcrumb(subcategory_id)
        if result is None:
            raise ResourceNotFoundException("subcategory", subcategory_id)
        return result
