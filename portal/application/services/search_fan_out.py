"""Fan-out of one search query to every registered source, with per-source fault isolation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from portal.application.dtos.search import SearchQuery, SearchResultItem
from portal.shared.telemetry.tracing import TracedOperation

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import ISearchRepository
    from portal.application.services.search_sources import SourceDescriptor

logger = logging.getLogger(__name__)


class SearchFanOut:
    """Run every source lookup independently and collect results by source position.

    A source that raises contributes an empty list; nothing it mapped before
    failing is kept. run() returns one list per source in the order of
    sources, whether lookups ran one after another or concurrently.
    """

    def __init__(
        self,
        search_repo: "ISearchRepository",
        sources: Sequence["SourceDescriptor"],
        *,
        concurrent: bool = False,
        source_timeout: float | None = None,
    ) -> None:
        self.search_repo = search_repo
        self.sources = tuple(sources)
        self.concurrent = concurrent
        self.source_timeout = source_timeout

    async def run(self, query: SearchQuery) -> list[list[SearchResultItem]]:
        if self.concurrent:
            # gather returns results in argument order, not completion order.
            batches = await asyncio.gather(
                *(self._run_source(source, query) for source in self.sources)
            )
            return list(batches)
        return [await self._run_source(source, query) for source in self.sources]

    async def _run_source(
        self, source: "SourceDescriptor", query: SearchQuery
    ) -> list[SearchResultItem]:
        label = source.label.value
        with TracedOperation("search.source", {"search.source": label}) as op:
            try:
                records = await self._lookup(source, query)
                results = [source.to_result(record) for record in records]
            except Exception as exc:
                logger.warning(
                    "Search source %r failed, contributing no results: %s: %s",
                    label,
                    type(exc).__name__,
                    exc,
                )
                op.record_error(exc)
                return []
            op.set_attribute("search.result_count", len(results))
            return results

    async def _lookup(self, source: "SourceDescriptor", query: SearchQuery):
        lookup = self.search_repo.find_matching(
            source.entity,
            query.term,
            query.limit,
            fields=source.match_fields,
            ancestors=source.ancestors,
        )
        if self.source_timeout is None:
            return await lookup
        return await asyncio.wait_for(lookup, timeout=self.source_timeout)
