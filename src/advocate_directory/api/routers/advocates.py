"""
Advocates router: search/sort listing.

Endpoints:
    GET /advocates    List advocates filtered by keyword and sorted by a
                      whitelisted column

Query parameters:
    keyword   Free text, matched case-insensitively against name, city,
              degree, specialties, phone number and years of experience
    sortBy    One of the column registry keys; anything else sorts by id
    sortDir   ``asc`` or ``desc`` (case-insensitive here); anything else is ``asc``
    limit     Optional window size for infinite scroll
    offset    Optional window start
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from advocate_directory.api.deps import OpContext
from advocate_directory.api.schemas.advocates import AdvocateList, AdvocateSchema, ErrorEnvelope, ListingEnvelope
from advocate_directory.core.query import MAX_LIMIT, SearchQuery
from advocate_directory.ops.advocates import list_advocates

router = APIRouter()


@router.get(
    "/advocates",
    response_model=ListingEnvelope,
    responses={500: {"model": ErrorEnvelope}},
)
def get_advocates(
    ctx: OpContext,
    keyword: str | None = Query(None, description="Free-text search term"),
    sort_by: str | None = Query(None, alias="sortBy", description="Column registry key"),
    sort_dir: str = Query("asc", alias="sortDir", description="asc | desc"),
    limit: int | None = Query(None, ge=1, le=MAX_LIMIT, description="Maximum rows to return"),
    offset: int = Query(0, ge=0, description="Rows to skip"),
):
    """List advocates matching *keyword*, ordered by *sortBy* / *sortDir*."""
    query = SearchQuery.from_params(
        keyword=keyword,
        sort_by=sort_by,
        sort_dir=sort_dir.lower(),
        limit=limit,
        offset=offset,
    )
    records = list_advocates(ctx, query)
    return ListingEnvelope(
        data=AdvocateList(data=[AdvocateSchema.model_validate(r) for r in records]),
    )
