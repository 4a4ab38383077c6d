# app/routers/listings.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.errors import ListingNotFoundError
from ..deps import get_store
from ..domain.models import ListingFilters
from ..schemas.common import ErrorResponse, ListingsResponse
from ..services.listings import ListingStore
from ..services.validation import parse_int, parse_number, parse_page

router = APIRouter(tags=["listings"])


@router.get(
    "/listings",
    summary="List listings with optional price/rooms filters",
    description=(
        "Filters are inclusive and combine with AND. Non-numeric or missing "
        "values are ignored rather than rejected."
    ),
)
def list_listings(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 20; non-positive falls back to it)"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    min_rooms: Optional[str] = Query(None, alias="minRooms"),
    max_rooms: Optional[str] = Query(None, alias="maxRooms"),
    store: ListingStore = Depends(get_store),
):
    filters = ListingFilters(
        min_price=parse_number(min_price),
        max_price=parse_number(max_price),
        min_rooms=parse_number(min_rooms),
        max_rooms=parse_number(max_rooms),
    )
    result = store.query(filters, page=parse_page(page), page_size=parse_int(limit))
    return ListingsResponse(
        items=[l.model_dump() for l in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    ).model_dump(by_alias=True)


@router.get(
    "/listings/{listing_id}",
    summary="Get one listing by id",
    responses={404: {"model": ErrorResponse}},
)
def get_listing(listing_id: str, store: ListingStore = Depends(get_store)):
    # a non-integer id can't match anything: same 404 as an unknown one
    lid = parse_int(listing_id)
    listing = store.get_by_id(lid) if lid is not None else None
    if listing is None:
        raise ListingNotFoundError()
    return listing.model_dump()
