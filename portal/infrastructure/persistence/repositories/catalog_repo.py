"""Catalog repository: id/name lookups behind the agent portal breadcrumbs."""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.application.dtos.catalog import BreadcrumbResult
from portal.infrastructure.persistence.models import Product, ProductSubcategory
from portal.infrastructure.persistence.repositories.base import BaseRepository


class CatalogRepository:
    """Breadcrumb lookups for products and product subcategories."""

    def __init__(self, db: AsyncSession) -> None:
        self.products = BaseRepository(db, Product)
        self.subcategories = BaseRepository(db, ProductSubcategory)

    async def get_product_breadcrumb(self, product_id: str) -> BreadcrumbResult | None:
        product = await self.products.get_by_id(product_id)
        if product is None:
            return None
        return BreadcrumbResult(id=product.id, name=product.name)

    async def get_subcategory_breadcrumb(
        self, subcategory_id: str
    ) -> BreadcrumbResult | None:
        subcategory = await self.subcategories.get_by_id(subcategory_id)
        if subcategory is None:
            return None
        return BreadcrumbResult(id=subcategory.id, name=subcategory.name)
