"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from portal.application.use_cases.search import SearchService
from portal.core.config import Settings, get_settings
from portal.infrastructure.persistence.database import get_session_factory
from portal.infrastructure.persistence.repositories import SearchRepository


async def get_search_repo(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchRepository:
    """Search repository; the session is opened only when the search actually runs."""
    return SearchRepository(
        get_session_factory,
        session_per_lookup=settings.search_concurrent_sources,
    )


async def get_search_service(
    search_repo: Annotated[SearchRepository, Depends(get_search_repo)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """Federated search use case over every registered source."""
    return SearchService(
        search_repo,
        default_limit=settings.search_default_limit,
        concurrent=settings.search_concurrent_sources,
        source_timeout=settings.search_source_timeout_seconds,
    )
