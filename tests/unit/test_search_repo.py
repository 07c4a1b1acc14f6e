"""SearchRepository wiring that needs no database: patterns, model mapping, session handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import inspect as sa_inspect

from portal.application.services.search_sources import SOURCE_REGISTRY
from portal.domain.enums import SearchEntity
from portal.infrastructure.persistence.repositories.search_repo import (
    SearchRepository,
    ancestor_loader,
    contains_pattern,
    model_for,
)


@pytest.mark.parametrize(
    ("term", "pattern"),
    [
        ("cream", "%cream%"),
        ("50%", "%50\\%%"),
        ("a_b", "%a\\_b%"),
        ("c:\\x", "%c:\\\\x%"),
    ],
)
def test_contains_pattern_escapes_wildcards(term: str, pattern: str) -> None:
    assert contains_pattern(term) == pattern


def test_every_entity_has_a_model() -> None:
    for entity in SearchEntity:
        assert model_for(entity).__tablename__ == next(
            s.table for s in SOURCE_REGISTRY if s.entity is entity
        )


@pytest.mark.parametrize("source", SOURCE_REGISTRY, ids=lambda s: s.entity.value)
def test_source_fields_and_ancestors_exist_on_model(source) -> None:
    model = model_for(source.entity)
    columns = set(sa_inspect(model).columns.keys())
    assert set(source.match_fields) <= columns
    for path in source.ancestors:
        assert ancestor_loader(model, path) is not None


def test_ancestor_loader_rejects_unknown_relation() -> None:
    with pytest.raises(AttributeError):
        ancestor_loader(model_for(SearchEntity.SOP), "sop_category.nope")


def _session_factory(session: AsyncMock) -> MagicMock:
    return MagicMock(return_value=session)


async def test_enter_failure_closes_session_and_raises() -> None:
    session = AsyncMock()
    session.connection.side_effect = OSError("connection refused")
    repo = SearchRepository(lambda: _session_factory(session))
    with pytest.raises(OSError):
        async with repo:
            pass
    session.close.assert_awaited_once()


async def test_exit_closes_session() -> None:
    session = AsyncMock()
    repo = SearchRepository(lambda: _session_factory(session))
    async with repo:
        session.close.assert_not_awaited()
    session.close.assert_awaited_once()


async def test_close_failure_is_logged_not_raised() -> None:
    session = AsyncMock()
    session.close.side_effect = OSError("socket gone")
    async with SearchRepository(lambda: _session_factory(session)):
        pass


async def test_find_matching_requires_context() -> None:
    repo = SearchRepository(lambda: _session_factory(AsyncMock()))
    with pytest.raises(RuntimeError):
        await repo.find_matching(SearchEntity.BRAND, "x", 5, fields=("name",))


async def test_provider_not_called_before_enter() -> None:
    provider = MagicMock()
    SearchRepository(provider)
    provider.assert_not_called()
