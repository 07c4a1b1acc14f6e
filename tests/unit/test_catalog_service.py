"""CatalogService breadcrumb lookups with mocked repository."""

from unittest.mock import AsyncMock

import pytest

from portal.application.dtos.catalog import BreadcrumbResult
from portal.application.use_cases.catalog import CatalogService
from portal.domain.exceptions import ResourceNotFoundException


async def test_product_breadcrumb_found() -> None:
    repo = AsyncMock()
    repo.get_product_breadcrumb = AsyncMock(
        return_value=BreadcrumbResult(id="p1", name="Day Cream")
    )
    result = await CatalogService(repo).get_product_breadcrumb("p1")
    assert result == BreadcrumbResult(id="p1", name="Day Cream")
    repo.get_product_breadcrumb.assert_awaited_once_with("p1")


async def test_product_breadcrumb_missing_raises() -> None:
    repo = AsyncMock()
    repo.get_product_breadcrumb = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await CatalogService(repo).get_product_breadcrumb("nope")
    assert exc_info.value.details == {"resource_type": "product", "resource_id": "nope"}


async def test_subcategory_breadcrumb_missing_raises() -> None:
    repo = AsyncMock()
    repo.get_subcategory_breadcrumb = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await CatalogService(repo).get_subcategory_breadcrumb("nope")
