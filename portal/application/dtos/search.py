"""DTOs for federated search (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SearchQuery:
    """Normalized search request: trimmed term and per-source limit."""

    raw_term: str
    term: str
    limit: int

    @property
    def is_empty(self) -> bool:
        return not self.term


@dataclass(frozen=True)
class SearchResultItem:
    """Single search hit in the uniform shape shared by every source."""

    type: str
    id: str
    title: str
    description: str | None
    link: str  # "#" when the entity has no detail page
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResults:
    """Aggregated hits in source priority order. query is None for a skipped (empty) search."""

    results: list[SearchResultItem]
    query: str | None = None

    @property
    def total(self) -> int:
        return len(self.results)
