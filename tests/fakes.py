"""In-memory stand-ins for the persistence ports and a small portal dataset."""

import asyncio
from collections.abc import Sequence
from types import SimpleNamespace
from typing import Any

from portal.application.dtos.catalog import BreadcrumbResult
from portal.application.services.search_sources import get_source
from portal.domain.enums import SearchEntity


class InMemorySearchRepository:
    """ISearchRepository over plain objects grouped by entity.

    failing entities raise on lookup; delays (seconds) let tests reorder
    completion when sources run concurrently.
    """

    def __init__(
        self,
        records: dict[SearchEntity, list[Any]] | None = None,
        *,
        failing: Sequence[SearchEntity] = (),
        delays: dict[SearchEntity, float] | None = None,
        fail_on_enter: bool = False,
    ) -> None:
        self.records = records or {}
        self.failing = set(failing)
        self.delays = delays or {}
        self.fail_on_enter = fail_on_enter
        self.entered = False
        self.exited = False
        self.calls: list[tuple[SearchEntity, str, int]] = []

    async def __aenter__(self) -> "InMemorySearchRepository":
        if self.fail_on_enter:
            raise ConnectionRefusedError("database unreachable")
        self.entered = True
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.exited = True

    async def find_matching(
        self,
        entity: SearchEntity,
        term: str,
        limit: int,
        *,
        fields: Sequence[str],
        ancestors: Sequence[str] = (),
    ) -> list[Any]:
        self.calls.append((entity, term, limit))
        delay = self.delays.get(entity)
        if delay:
            await asyncio.sleep(delay)
        if entity in self.failing:
            raise RuntimeError(f"{entity.value} table is broken")
        source = get_source(entity)
        rows = [r for r in self.records.get(entity, []) if source.matches(r, term)]
        return rows[:limit]


class InMemoryCatalogRepository:
    """ICatalogRepository over dicts of id -> name."""

    def __init__(
        self,
        products: dict[str, str] | None = None,
        subcategories: dict[str, str] | None = None,
    ) -> None:
        self.products = products or {}
        self.subcategories = subcategories or {}

    async def get_product_breadcrumb(self, product_id: str) -> BreadcrumbResult | None:
        name = self.products.get(product_id)
        return BreadcrumbResult(id=product_id, name=name) if name is not None else None

    async def get_subcategory_breadcrumb(
        self, subcategory_id: str
    ) -> BreadcrumbResult | None:
        name = self.subcategories.get(subcategory_id)
        return (
            BreadcrumbResult(id=subcategory_id, name=name) if name is not None else None
        )


def make_catalog() -> dict[SearchEntity, list[Any]]:
    """Small portal dataset: two brands, a product line, an SOP and one agent."""
    acme = SimpleNamespace(id="b1", name="Acme", description=None)
    creamco = SimpleNamespace(id="b2", name="CreamCo", description="Cream specialists")
    skin_care = SimpleNamespace(id="c1", name="Skin Care", description=None, brand=acme)
    day_cream = SimpleNamespace(
        id="p1",
        name="Day Cream",
        description=None,
        capacity="50 ml",
        status="active",
        brand=acme,
        category=skin_care,
        subcategory=None,
    )
    complaints = SimpleNamespace(id="sc1", name="Complaints", description=None)
    refund = SimpleNamespace(
        id="s1",
        name="Refund Cream Orders",
        description="How to refund",
        sop_category=complaints,
    )
    agent = SimpleNamespace(
        id="a1", name="Rina", email="cream.desk@example.com", category="Skin Care"
    )
    return {
        SearchEntity.BRAND: [acme, creamco],
        SearchEntity.CATEGORY: [skin_care],
        SearchEntity.PRODUCT: [day_cream],
        SearchEntity.SOP_CATEGORY: [complaints],
        SearchEntity.SOP: [refund],
        SearchEntity.AGENT: [agent],
    }

