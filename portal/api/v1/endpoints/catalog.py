"""Catalog API: breadcrumb labels for product and subcategory pages."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import get_catalog_service
from portal.application.use_cases.catalog import CatalogService
from portal.schemas.catalog import BreadcrumbResponse

router = APIRouter()


@router.get("/products/{product_id}/breadcrumb", response_model=BreadcrumbResponse)
async def get_product_breadcrumb(
    product_id: str,
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Id and name of a product (404 if unknown)."""
    crumb = await catalog_svc.get_product_breadcrumb(product_id)
    return BreadcrumbResponse(id=crumb.id, name=crumb.name)


@router.get(
    "/subcategories/{subcategory_id}/breadcrumb", response_model=BreadcrumbResponse
)
async def get_subcategory_breadcrumb(
    subcategory_id: str,
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Id and name of a product subcategory (404 if unknown)."""
    crumb = await catalog_svc.get_subcategory_breadcrumb(subcategory_id)
    return BreadcrumbResponse(id=crumb.id, name=crumb.name)
