"""Search source registry: one descriptor per searchable entity type.

Each descriptor declares the fields its match predicate ORs over, the ancestor
relations its mapper walks, and the mapper into the uniform SearchResultItem.
SOURCE_REGISTRY order is the output order of every search response.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from portal.application.dtos.search import SearchResultItem
from portal.application.services.search_links import (
    NO_DETAIL_PAGE,
    brand_link,
    category_link,
    knowledge_link,
    product_link,
    quality_training_link,
    sop_category_link,
    sop_link,
    subcategory_link,
)
from portal.domain.enums import SearchEntity, SearchResultType

DESCRIPTION_MAX_LENGTH = 200


def truncate(text: str | None, max_length: int = DESCRIPTION_MAX_LENGTH) -> str | None:
    """First max_length characters of a long free-text column (None passes through)."""
    if text is None:
        return None
    return text[:max_length]


def record_matches(record: Any, fields: Sequence[str], term: str) -> bool:
    """True if any field of record contains term, ignoring case. Null fields never match."""
    needle = term.lower()
    for name in fields:
        value = getattr(record, name, None)
        if value is not None and needle in str(value).lower():
            return True
    return False


def _metadata(table: str, **values: Any) -> dict[str, Any]:
    # None values are dropped, as undefined keys are in the JSON the portal UI reads.
    return {"table": table, **{k: v for k, v in values.items() if v is not None}}


def _name_of(obj: Any) -> str | None:
    return obj.name if obj is not None else None


@dataclass(frozen=True)
class SourceDescriptor:
    """Search definition of one entity type (fields, ancestors, mapper)."""

    label: SearchResultType
    entity: SearchEntity
    table: str
    match_fields: tuple[str, ...]
    ancestors: tuple[str, ...]
    mapper: Callable[[Any, str], SearchResultItem]

    def matches(self, record: Any, term: str) -> bool:
        return record_matches(record, self.match_fields, term)

    def to_result(self, record: Any) -> SearchResultItem:
        return self.mapper(record, self.table)


# Product hierarchy


def _brand(brand: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.BRAND.value,
        id=str(brand.id),
        title=brand.name,
        description=brand.description,
        link=brand_link(brand.name),
        metadata=_metadata(table),
    )


def _category(category: Any, table: str) -> SearchResultItem:
    brand = category.brand
    return SearchResultItem(
        type=SearchResultType.CATEGORY.value,
        id=str(category.id),
        title=category.name,
        description=category.description,
        link=category_link(brand.name, category.name),
        metadata=_metadata(table, brand=brand.name),
    )


def _subcategory(subcategory: Any, table: str) -> SearchResultItem:
    category = subcategory.category
    brand = category.brand
    return SearchResultItem(
        type=SearchResultType.SUBCATEGORY.value,
        id=str(subcategory.id),
        title=subcategory.name,
        description=subcategory.description,
        link=subcategory_link(brand.name, category.name, subcategory.name),
        metadata=_metadata(table, brand=brand.name, category=category.name),
    )


def _product(product: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.PRODUCT.value,
        id=str(product.id),
        title=product.name,
        description=product.description or product.capacity or None,
        link=product_link(product),
        metadata=_metadata(
            table,
            brand=_name_of(product.brand),
            category=_name_of(product.category),
            subcategory=_name_of(product.subcategory),
            status=product.status,
        ),
    )


def _product_detail(detail: Any, table: str) -> SearchResultItem:
    product = detail.product
    return SearchResultItem(
        type=SearchResultType.PRODUCT_DETAIL.value,
        id=str(detail.id),
        title=detail.name,
        description=truncate(detail.detail),
        link=product_link(product),
        metadata=_metadata(
            table,
            product=product.name,
            brand=_name_of(product.brand),
            category=_name_of(product.category),
            subcategory=_name_of(product.subcategory),
        ),
    )


# SOP hierarchy


def _sop_category(sop_category: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.SOP_CATEGORY.value,
        id=str(sop_category.id),
        title=sop_category.name,
        description=sop_category.description,
        link=sop_category_link(sop_category.name),
        metadata=_metadata(table),
    )


def _sop(sop: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.SOP.value,
        id=str(sop.id),
        title=sop.name,
        description=sop.description,
        link=sop_link(sop),
        metadata=_metadata(table, kategoriSOP=sop.sop_category.name),
    )


def _sop_type(sop_type: Any, table: str) -> SearchResultItem:
    sop = sop_type.sop
    return SearchResultItem(
        type=SearchResultType.SOP_TYPE.value,
        id=str(sop_type.id),
        title=sop_type.name,
        description=truncate(sop_type.content) or None,
        link=sop_link(sop),
        metadata=_metadata(table, kategoriSOP=sop.sop_category.name, sop=sop.name),
    )


def _sop_detail(sop_detail: Any, table: str) -> SearchResultItem:
    sop_type = sop_detail.sop_type
    sop = sop_type.sop
    return SearchResultItem(
        type=SearchResultType.SOP_DETAIL.value,
        id=str(sop_detail.id),
        title=sop_detail.name,
        description=truncate(sop_detail.value),
        link=sop_link(sop),
        metadata=_metadata(
            table,
            kategoriSOP=sop.sop_category.name,
            sop=sop.name,
            jenisSOP=sop_type.name,
        ),
    )


# Knowledge hierarchy


def _knowledge(knowledge: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.KNOWLEDGE.value,
        id=str(knowledge.id),
        title=knowledge.title,
        description=knowledge.description,
        link=knowledge_link(knowledge.title),
        metadata=_metadata(table),
    )


def _detail_knowledge(detail: Any, table: str) -> SearchResultItem:
    knowledge = detail.knowledge
    return SearchResultItem(
        type=SearchResultType.DETAIL_KNOWLEDGE.value,
        id=str(detail.id),
        title=detail.name,
        description=truncate(detail.description),
        link=knowledge_link(knowledge.title),
        metadata=_metadata(table, knowledge=knowledge.title),
    )


def _type_detail_knowledge(type_detail: Any, table: str) -> SearchResultItem:
    detail = type_detail.detail_knowledge
    knowledge = detail.knowledge
    return SearchResultItem(
        type=SearchResultType.TYPE_DETAIL_KNOWLEDGE.value,
        id=str(type_detail.id),
        title=type_detail.name,
        description=truncate(type_detail.description),
        link=knowledge_link(knowledge.title),
        metadata=_metadata(table, knowledge=knowledge.title, detailKnowledge=detail.name),
    )


def _product_type_detail_knowledge(item: Any, table: str) -> SearchResultItem:
    type_detail = item.type_detail_knowledge
    detail = type_detail.detail_knowledge
    knowledge = detail.knowledge
    return SearchResultItem(
        type=SearchResultType.PRODUCT_TYPE_DETAIL_KNOWLEDGE.value,
        id=str(item.id),
        title=item.name,
        description=truncate(item.description),
        link=knowledge_link(knowledge.title),
        metadata=_metadata(
            table,
            knowledge=knowledge.title,
            detailKnowledge=detail.name,
            jenisDetailKnowledge=type_detail.name,
        ),
    )


# Quality-training hierarchy


def _quality_training(training: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.QUALITY_TRAINING.value,
        id=str(training.id),
        title=training.title,
        description=training.description,
        link=quality_training_link(training.title),
        metadata=_metadata(table),
    )


def _type_quality_training(type_training: Any, table: str) -> SearchResultItem:
    training = type_training.quality_training
    return SearchResultItem(
        type=SearchResultType.TYPE_QUALITY_TRAINING.value,
        id=str(type_training.id),
        title=type_training.name,
        description=type_training.description,
        link=quality_training_link(training.title),
        metadata=_metadata(table, qualityTraining=training.title),
    )


def _detail_quality_training(detail: Any, table: str) -> SearchResultItem:
    type_training = detail.type_quality_training
    training = type_training.quality_training
    return SearchResultItem(
        type=SearchResultType.DETAIL_QUALITY_TRAINING.value,
        id=str(detail.id),
        title=detail.name,
        description=detail.description,
        link=quality_training_link(training.title),
        metadata=_metadata(
            table,
            qualityTraining=training.title,
            jenisQualityTraining=type_training.name,
        ),
    )


def _subdetail_quality_training(subdetail: Any, table: str) -> SearchResultItem:
    detail = subdetail.detail_quality_training
    type_training = detail.type_quality_training
    training = type_training.quality_training
    return SearchResultItem(
        type=SearchResultType.SUBDETAIL_QUALITY_TRAINING.value,
        id=str(subdetail.id),
        title=subdetail.name,
        description=subdetail.description,
        link=quality_training_link(training.title),
        metadata=_metadata(
            table,
            qualityTraining=training.title,
            jenisQualityTraining=type_training.name,
            detailQualityTraining=detail.name,
        ),
    )


# Flat entities (no detail page)


def _user(user: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.USER.value,
        id=str(user.id),
        title=user.name,
        description=user.email,
        link=NO_DETAIL_PAGE,
        metadata=_metadata(table, email=user.email, role=user.role),
    )


def _agent(agent: Any, table: str) -> SearchResultItem:
    return SearchResultItem(
        type=SearchResultType.AGENT.value,
        id=str(agent.id),
        title=agent.name,
        description=agent.email,
        link=NO_DETAIL_PAGE,
        metadata=_metadata(table, email=agent.email, category=agent.category),
    )


_NAME_DESCRIPTION = ("name", "description")
_TITLE_DESCRIPTION = ("title", "description")
_PRODUCT_ANCESTORS = ("brand", "category", "subcategory")

SOURCE_REGISTRY: tuple[SourceDescriptor, ...] = (
    SourceDescriptor(
        SearchResultType.BRAND, SearchEntity.BRAND, "brands", _NAME_DESCRIPTION, (), _brand
    ),
    SourceDescriptor(
        SearchResultType.CATEGORY,
        SearchEntity.CATEGORY,
        "kategori_produks",
        _NAME_DESCRIPTION,
        ("brand",),
        _category,
    ),
    SourceDescriptor(
        SearchResultType.SUBCATEGORY,
        SearchEntity.SUBCATEGORY,
        "subkategori_produks",
        _NAME_DESCRIPTION,
        ("category.brand",),
        _subcategory,
    ),
    SourceDescriptor(
        SearchResultType.PRODUCT,
        SearchEntity.PRODUCT,
        "produks",
        ("name", "description", "capacity"),
        _PRODUCT_ANCESTORS,
        _product,
    ),
    SourceDescriptor(
        SearchResultType.PRODUCT_DETAIL,
        SearchEntity.PRODUCT_DETAIL,
        "detail_produks",
        ("name", "detail"),
        tuple(f"product.{rel}" for rel in _PRODUCT_ANCESTORS),
        _product_detail,
    ),
    SourceDescriptor(
        SearchResultType.SOP_CATEGORY,
        SearchEntity.SOP_CATEGORY,
        "kategori_sops",
        _NAME_DESCRIPTION,
        (),
        _sop_category,
    ),
    SourceDescriptor(
        SearchResultType.SOP, SearchEntity.SOP, "sops", _NAME_DESCRIPTION, ("sop_category",), _sop
    ),
    SourceDescriptor(
        SearchResultType.SOP_TYPE,
        SearchEntity.SOP_TYPE,
        "jenis_sops",
        ("name", "content"),
        ("sop.sop_category",),
        _sop_type,
    ),
    SourceDescriptor(
        SearchResultType.SOP_DETAIL,
        SearchEntity.SOP_DETAIL,
        "detail_sops",
        ("name", "value"),
        ("sop_type.sop.sop_category",),
        _sop_detail,
    ),
    SourceDescriptor(
        SearchResultType.KNOWLEDGE,
        SearchEntity.KNOWLEDGE,
        "knowledges",
        _TITLE_DESCRIPTION,
        (),
        _knowledge,
    ),
    SourceDescriptor(
        SearchResultType.DETAIL_KNOWLEDGE,
        SearchEntity.DETAIL_KNOWLEDGE,
        "detail_knowledges",
        _NAME_DESCRIPTION,
        ("knowledge",),
        _detail_knowledge,
    ),
    SourceDescriptor(
        SearchResultType.TYPE_DETAIL_KNOWLEDGE,
        SearchEntity.TYPE_DETAIL_KNOWLEDGE,
        "jenis_detail_knowledges",
        _NAME_DESCRIPTION,
        ("detail_knowledge.knowledge",),
        _type_detail_knowledge,
    ),
    SourceDescriptor(
        SearchResultType.PRODUCT_TYPE_DETAIL_KNOWLEDGE,
        SearchEntity.PRODUCT_TYPE_DETAIL_KNOWLEDGE,
        "produk_jenis_detail_knowledges",
        _NAME_DESCRIPTION,
        ("type_detail_knowledge.detail_knowledge.knowledge",),
        _product_type_detail_knowledge,
    ),
    SourceDescriptor(
        SearchResultType.QUALITY_TRAINING,
        SearchEntity.QUALITY_TRAINING,
        "quality_trainings",
        _TITLE_DESCRIPTION,
        (),
        _quality_training,
    ),
    SourceDescriptor(
        SearchResultType.TYPE_QUALITY_TRAINING,
        SearchEntity.TYPE_QUALITY_TRAINING,
        "jenis_quality_trainings",
        _NAME_DESCRIPTION,
        ("quality_training",),
        _type_quality_training,
    ),
    SourceDescriptor(
        SearchResultType.DETAIL_QUALITY_TRAINING,
        SearchEntity.DETAIL_QUALITY_TRAINING,
        "detail_quality_trainings",
        _NAME_DESCRIPTION,
        ("type_quality_training.quality_training",),
        _detail_quality_training,
    ),
    SourceDescriptor(
        SearchResultType.SUBDETAIL_QUALITY_TRAINING,
        SearchEntity.SUBDETAIL_QUALITY_TRAINING,
        "subdetail_quality_trainings",
        _NAME_DESCRIPTION,
        ("detail_quality_training.type_quality_training.quality_training",),
        _subdetail_quality_training,
    ),
    SourceDescriptor(
        SearchResultType.USER, SearchEntity.USER, "users", ("name", "email"), (), _user
    ),
    SourceDescriptor(
        SearchResultType.AGENT, SearchEntity.AGENT, "agents", ("name", "email"), (), _agent
    ),
)


def get_source(entity: SearchEntity) -> SourceDescriptor:
    """Return the registered descriptor for entity."""
    for source in SOURCE_REGISTRY:
        if source.entity is entity:
            return source
    raise KeyError(entity)
