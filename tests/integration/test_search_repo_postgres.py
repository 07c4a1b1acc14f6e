"""SearchRepository against Postgres.

Tables are created inside the test transaction; the search sessions join the
same connection through savepoints, and everything is rolled back afterwards.
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from portal.application.services.search_sources import get_source
from portal.application.use_cases.search import SearchService
from portal.domain.enums import SearchEntity
from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models import (
    Brand,
    Product,
    ProductCategory,
    Sop,
    SopCategory,
)
from portal.infrastructure.persistence.repositories import (
    CatalogRepository,
    SearchRepository,
)


@pytest.fixture
async def seeded(db_session):
    """Create tables if missing and seed a catalog tagged with a unique marker."""
    conn = await db_session.connection()
    await conn.run_sync(Base.metadata.create_all)
    tag = uuid.uuid4().hex[:8]
    acme = Brand(name=f"Acme {tag}")
    skin = ProductCategory(name="Skin Care", brand=acme)
    product = Product(name=f"Day Cream {tag}", capacity="50 ml", brand=acme, category=skin)
    complaints = SopCategory(name=f"Complaints {tag}")
    sop = Sop(name=f"Refund 100%_{tag}", sop_category=complaints)
    db_session.add_all([acme, skin, product, complaints, sop])
    await db_session.flush()
    return conn, tag, product


def _search_repo(conn) -> SearchRepository:
    factory = async_sessionmaker(
        bind=conn, expire_on_commit=False, join_transaction_mode="create_savepoint"
    )
    return SearchRepository(lambda: factory)


@pytest.mark.requires_db
async def test_find_matching_loads_ancestors(seeded) -> None:
    conn, tag, _ = seeded
    source = get_source(SearchEntity.PRODUCT)
    async with _search_repo(conn) as repo:
        rows = await repo.find_matching(
            SearchEntity.PRODUCT,
            tag.upper(),
            10,
            fields=source.match_fields,
            ancestors=source.ancestors,
        )
        assert len(rows) == 1
        item = source.to_result(rows[0])
    assert item.link == f"/agent/products/acme-{tag}/skin-care/day-cream-{tag}"
    assert item.description == "50 ml"


@pytest.mark.requires_db
async def test_wildcards_are_literal(seeded) -> None:
    conn, tag, _ = seeded
    source = get_source(SearchEntity.SOP)
    async with _search_repo(conn) as repo:
        literal = await repo.find_matching(
            SearchEntity.SOP, f"100%_{tag}", 10, fields=source.match_fields
        )
        wildcard = await repo.find_matching(
            SearchEntity.SOP, f"1%{tag}", 10, fields=source.match_fields
        )
    assert len(literal) == 1
    assert wildcard == []


@pytest.mark.requires_db
async def test_search_service_end_to_end(seeded) -> None:
    conn, tag, _ = seeded
    results = await SearchService(_search_repo(conn)).search(f"  {tag} ")
    assert [i.type for i in results.results] == ["Brand", "Product", "SOP Category", "SOP"]
    assert results.query == tag


@pytest.mark.requires_db
async def test_catalog_breadcrumb(seeded, db_session) -> None:
    _, _, product = seeded
    repo = CatalogRepository(db_session)
    crumb = await repo.get_product_breadcrumb(product.id)
    assert crumb is not None
    assert crumb.name == product.name
    assert await repo.get_subcategory_breadcrumb("missing") is None
