"""Fan-out executor: per-source isolation, order under concurrency, timeouts."""

import logging

import pytest

from portal.application.dtos.search import SearchQuery
from portal.application.services.search_fan_out import SearchFanOut
from portal.application.services.search_sources import SOURCE_REGISTRY
from portal.domain.enums import SearchEntity
from tests.fakes import InMemorySearchRepository, make_catalog


def _query(term: str = "cream", limit: int = 50) -> SearchQuery:
    return SearchQuery(raw_term=term, term=term, limit=limit)


def _labels(batches) -> list[str]:
    return [item.type for batch in batches for item in batch]


async def test_one_batch_per_source_in_registry_order() -> None:
    repo = InMemorySearchRepository(make_catalog())
    batches = await SearchFanOut(repo, SOURCE_REGISTRY).run(_query())
    assert len(batches) == len(SOURCE_REGISTRY)
    assert _labels(batches) == ["Brand", "Product", "SOP", "Agent"]


async def test_failing_source_contributes_nothing(caplog: pytest.LogCaptureFixture) -> None:
    repo = InMemorySearchRepository(make_catalog(), failing=[SearchEntity.PRODUCT])
    with caplog.at_level(logging.WARNING):
        batches = await SearchFanOut(repo, SOURCE_REGISTRY).run(_query())
    assert _labels(batches) == ["Brand", "SOP", "Agent"]
    assert "'Product' failed" in caplog.text


async def test_mapper_failure_is_isolated() -> None:
    """A record with a broken ancestor chain drops its whole source, not the query."""
    records = make_catalog()
    records[SearchEntity.SOP][0].sop_category = None
    repo = InMemorySearchRepository(records)
    batches = await SearchFanOut(repo, SOURCE_REGISTRY).run(_query())
    assert _labels(batches) == ["Brand", "Product", "Agent"]


async def test_every_source_failing_still_returns_empty_batches() -> None:
    repo = InMemorySearchRepository(make_catalog(), failing=list(SearchEntity))
    batches = await SearchFanOut(repo, SOURCE_REGISTRY).run(_query())
    assert batches == [[] for _ in SOURCE_REGISTRY]


async def test_concurrent_order_ignores_completion_order() -> None:
    # Brand finishes last, agent first; output order must stay registry order.
    repo = InMemorySearchRepository(
        make_catalog(),
        delays={SearchEntity.BRAND: 0.05, SearchEntity.PRODUCT: 0.02},
    )
    fan_out = SearchFanOut(repo, SOURCE_REGISTRY, concurrent=True)
    batches = await fan_out.run(_query())
    assert _labels(batches) == ["Brand", "Product", "SOP", "Agent"]


async def test_concurrent_failure_is_isolated() -> None:
    repo = InMemorySearchRepository(make_catalog(), failing=[SearchEntity.BRAND])
    fan_out = SearchFanOut(repo, SOURCE_REGISTRY, concurrent=True)
    batches = await fan_out.run(_query())
    assert _labels(batches) == ["Product", "SOP", "Agent"]


async def test_source_timeout_drops_slow_source() -> None:
    repo = InMemorySearchRepository(make_catalog(), delays={SearchEntity.PRODUCT: 1.0})
    fan_out = SearchFanOut(repo, SOURCE_REGISTRY, source_timeout=0.05)
    batches = await fan_out.run(_query())
    assert _labels(batches) == ["Brand", "SOP", "Agent"]


async def test_limit_and_term_passed_to_every_source() -> None:
    repo = InMemorySearchRepository(make_catalog())
    await SearchFanOut(repo, SOURCE_REGISTRY).run(_query("cream", limit=3))
    assert [c[0] for c in repo.calls] == [s.entity for s in SOURCE_REGISTRY]
    assert {(c[1], c[2]) for c in repo.calls} == {("cream", 3)}
