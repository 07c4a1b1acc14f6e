"""Federated search use case: normalize, fan out to every source, aggregate in registry order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from portal.application.dtos.search import SearchResults
from portal.application.services.search_fan_out import SearchFanOut
from portal.application.services.search_query import DEFAULT_LIMIT, normalize_query
from portal.application.services.search_sources import SOURCE_REGISTRY
from portal.domain.exceptions import SearchFailedException
from portal.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import ISearchRepository
    from portal.application.services.search_sources import SourceDescriptor

logger = logging.getLogger(__name__)


class SearchService:
    """Keyword search across products, SOPs, knowledge, quality training, users and agents.

    Matching is case-insensitive substring containment; there is no ranking
    beyond the fixed source order of the registry.
    """

    def __init__(
        self,
        search_repo: "ISearchRepository",
        sources: Sequence["SourceDescriptor"] = SOURCE_REGISTRY,
        *,
        default_limit: int = DEFAULT_LIMIT,
        concurrent: bool = False,
        source_timeout: float | None = None,
    ) -> None:
        self.search_repo = search_repo
        self.default_limit = default_limit
        self.fan_out = SearchFanOut(
            search_repo,
            sources,
            concurrent=concurrent,
            source_timeout=source_timeout,
        )

    @traced("search.query")
    async def search(self, q: str | None, limit: str | None = None) -> SearchResults:
        """Run one search request.

        An empty or blank q returns no results without touching persistence.
        A failing source only loses its own hits. Anything failing outside the
        sources (e.g. the database cannot be reached) raises SearchFailedException.
        """
        query = normalize_query(q, limit, self.default_limit)
        if query.is_empty:
            return SearchResults(results=[])

        add_span_attributes(**{"search.limit": query.limit})
        try:
            async with self.search_repo:
                batches = await self.fan_out.run(query)
        except Exception as exc:
            logger.exception("Search failed for query %r", query.term)
            raise SearchFailedException() from exc

        results = [item for batch in batches for item in batch]
        add_span_attributes(**{"search.total": len(results)})
        return SearchResults(results=results, query=query.term)
