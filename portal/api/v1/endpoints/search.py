"""Search API: keyword search federated across every portal source."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from portal.api.v1.dependencies import get_search_service
from portal.application.use_cases.search import SearchService
from portal.core.limiter import limit_search
from portal.schemas.search import SearchErrorResponse, SearchResponse

router = APIRouter()


@router.get(
    "",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "Search failed", "model": SearchErrorResponse}},
)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str | None = Query(None, description="Search term (trimmed; blank returns nothing)"),
    limit: str | None = Query(
        None, description="Max results per source; invalid or non-positive uses the default"
    ),
):
    """Case-insensitive substring search; results grouped in fixed source order.

    The limit caps each source separately, so total may exceed it.
    """
    results = await search_svc.search(q, limit)
    return SearchResponse.from_results(results)
