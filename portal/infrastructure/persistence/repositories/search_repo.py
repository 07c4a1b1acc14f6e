"""Search repository: case-insensitive substring lookups across every portal table.

Each lookup runs inside its own SAVEPOINT so a failing source rolls back only
its own statement and the request transaction stays usable for the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Self

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from portal.domain.enums import SearchEntity
from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models import (
    Agent,
    Brand,
    DetailKnowledge,
    DetailQualityTraining,
    Knowledge,
    Product,
    ProductCategory,
    ProductDetail,
    ProductSubcategory,
    ProductTypeDetailKnowledge,
    QualityTraining,
    Sop,
    SopCategory,
    SopDetail,
    SopType,
    SubdetailQualityTraining,
    TypeDetailKnowledge,
    TypeQualityTraining,
    User,
)

logger = logging.getLogger(__name__)

_ENTITY_MODELS: dict[SearchEntity, type[Base]] = {
    SearchEntity.BRAND: Brand,
    SearchEntity.CATEGORY: ProductCategory,
    SearchEntity.SUBCATEGORY: ProductSubcategory,
    SearchEntity.PRODUCT: Product,
    SearchEntity.PRODUCT_DETAIL: ProductDetail,
    SearchEntity.SOP_CATEGORY: SopCategory,
    SearchEntity.SOP: Sop,
    SearchEntity.SOP_TYPE: SopType,
    SearchEntity.SOP_DETAIL: SopDetail,
    SearchEntity.KNOWLEDGE: Knowledge,
    SearchEntity.DETAIL_KNOWLEDGE: DetailKnowledge,
    SearchEntity.TYPE_DETAIL_KNOWLEDGE: TypeDetailKnowledge,
    SearchEntity.PRODUCT_TYPE_DETAIL_KNOWLEDGE: ProductTypeDetailKnowledge,
    SearchEntity.QUALITY_TRAINING: QualityTraining,
    SearchEntity.TYPE_QUALITY_TRAINING: TypeQualityTraining,
    SearchEntity.DETAIL_QUALITY_TRAINING: DetailQualityTraining,
    SearchEntity.SUBDETAIL_QUALITY_TRAINING: SubdetailQualityTraining,
    SearchEntity.USER: User,
    SearchEntity.AGENT: Agent,
}


def model_for(entity: SearchEntity) -> type[Base]:
    """ORM model backing a search entity."""
    return _ENTITY_MODELS[entity]


def contains_pattern(term: str) -> str:
    """ILIKE pattern matching term anywhere, with %, _ and backslash taken literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def ancestor_loader(model: type[Base], path: str) -> Any:
    """Chained selectinload for a dotted relationship path such as "sop.sop_category"."""
    loader: Any = None
    current: Any = model
    for name in path.split("."):
        attr = getattr(current, name)
        loader = selectinload(attr) if loader is None else loader.selectinload(attr)
        current = attr.property.mapper.class_
    return loader


class SearchRepository:
    """Substring search over one table per call.

    Use as an async context manager: entering resolves the session factory,
    opens a session and checks the connection; exiting closes it. Nothing
    touches the database before entering. With session_per_lookup each
    find_matching call uses its own pooled session so lookups can run
    concurrently.
    """

    def __init__(
        self,
        session_factory_provider: Callable[[], async_sessionmaker[AsyncSession]],
        *,
        session_per_lookup: bool = False,
    ) -> None:
        self._session_factory_provider = session_factory_provider
        self._session_per_lookup = session_per_lookup
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        session_factory = self._session_factory_provider()
        session = session_factory()
        try:
            await session.connection()
        except Exception:
            await session.close()
            raise
        self._session_factory = session_factory
        self._session = session
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        session, self._session = self._session, None
        self._session_factory = None
        if session is None:
            return
        try:
            await session.close()
        except Exception as close_exc:
            logger.warning("Failed to release search session: %s", close_exc)

    async def find_matching(
        self,
        entity: SearchEntity,
        term: str,
        limit: int,
        *,
        fields: Sequence[str],
        ancestors: Sequence[str] = (),
    ) -> list[Any]:
        """Return up to limit rows of entity where any of fields ILIKE %term%, ancestors loaded."""
        if self._session is None or self._session_factory is None:
            raise RuntimeError("SearchRepository must be entered with 'async with' before use")
        model: Any = model_for(entity)
        pattern = contains_pattern(term)
        stmt = (
            select(model)
            .where(or_(*(getattr(model, f).ilike(pattern, escape="\\") for f in fields)))
            .limit(limit)
        )
        if ancestors:
            stmt = stmt.options(*(ancestor_loader(model, path) for path in ancestors))

        if self._session_per_lookup:
            async with self._session_factory() as session:
                return await self._execute(session, stmt)
        return await self._execute(self._session, stmt)

    @staticmethod
    async def _execute(session: AsyncSession, stmt: Any) -> list[Any]:
        async with session.begin_nested():
            result = await session.execute(stmt)
            return list(result.scalars().all())
