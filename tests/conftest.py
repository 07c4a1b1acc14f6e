"""Pytest configuration and fixtures for the portal search API.

Uses portal.main:app for HTTP tests with the search and catalog repositories
replaced by in-memory fakes, and portal.infrastructure.persistence.database
for DB-dependent fixtures.
"""

import os

# All test requests share one client address; keep the per-client limit off.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.v1.dependencies import get_catalog_repo, get_search_repo
from portal.core.config import get_settings
from portal.infrastructure.persistence import database
from portal.main import app
from tests.fakes import InMemoryCatalogRepository, InMemorySearchRepository, make_catalog

get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def search_repo() -> InMemorySearchRepository:
    """In-memory search repository wired into GET /api/v1/search."""
    repo = InMemorySearchRepository(make_catalog())
    app.dependency_overrides[get_search_repo] = lambda: repo
    return repo


@pytest.fixture
def catalog_repo() -> InMemoryCatalogRepository:
    """In-memory catalog repository wired into the breadcrumb endpoints."""
    repo = InMemoryCatalogRepository(
        products={"p1": "Day Cream"}, subcategories={"sub1": "Moisturizers"}
    )
    app.dependency_overrides[get_catalog_repo] = lambda: repo
    return repo


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (or DIRECT_URL) pointing at Postgres. Skips when it
    is not configured. Run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL or DIRECT_URL")
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
