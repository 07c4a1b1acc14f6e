"""Search API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from portal.application.dtos.search import SearchResultItem, SearchResults


class SearchResultItemResponse(BaseModel):
    """Single search hit from any source."""

    type: str = Field(..., description="Human-readable source label, e.g. 'Product'")
    id: str
    title: str
    description: str | None = Field(
        default=None, description="Omitted when the source record has none"
    )
    link: str = Field(..., description="Agent portal path, or '#' when there is no page")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Source table plus ancestor names"
    )

    @classmethod
    def from_item(cls, item: SearchResultItem) -> "SearchResultItemResponse":
        return cls(
            type=item.type,
            id=item.id,
            title=item.title,
            description=item.description,
            link=item.link,
            metadata=dict(item.metadata),
        )


class SearchResponse(BaseModel):
    """Aggregated search response; query is absent for an empty search."""

    results: list[SearchResultItemResponse]
    total: int
    query: str | None = None

    @classmethod
    def from_results(cls, results: SearchResults) -> "SearchResponse":
        return cls(
            results=[SearchResultItemResponse.from_item(i) for i in results.results],
            total=results.total,
            query=results.query,
        )


class SearchErrorResponse(BaseModel):
    """Body of a failed search (500)."""

    error: str = Field(default="Failed to perform search")
    results: list[SearchResultItemResponse] = Field(default_factory=list)
    total: int = 0
