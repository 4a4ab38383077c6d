import json

import pytest
from pydantic import ValidationError

from app.core.errors import ListingsLoadError
from app.domain.models import Listing, ListingFilters
from app.services.listings import ListingStore


def test_price_range_first_page(store):
    res = store.query(ListingFilters(min_price=20000, max_price=40000), page=1, page_size=10)
    assert len(res.items) == 10
    assert all(20000 <= l.price <= 40000 for l in res.items)
    # ids 4..16 match across the whole collection
    assert res.total == 13
    assert res.total_pages == 2


def test_second_page_holds_the_rest(store):
    res = store.query(ListingFilters(min_price=20000, max_price=40000), page=2, page_size=10)
    assert [l.id for l in res.items] == [14, 15, 16]


def test_page_past_end_is_empty_but_counts_survive(store):
    res = store.query(ListingFilters(min_rooms=2), page=100000, page_size=20)
    assert res.items == []
    assert res.total == 23
    assert res.total_pages == 2
    assert res.page == 100000


def test_filters_preserve_insertion_order(store):
    res = store.query(ListingFilters(min_rooms=3, max_rooms=3), page=1, page_size=100)
    ids = [l.id for l in res.items]
    assert ids == sorted(ids)
    assert all(l.rooms == 3 for l in res.items)
    assert res.total == 8


def test_bounds_are_inclusive(store):
    res = store.query(ListingFilters(min_price=16500, max_price=16500))
    assert [l.id for l in res.items] == [1]


def test_no_filters_returns_everything_paged(store):
    res = store.query(page=1, page_size=20)
    assert res.total == 30
    assert len(res.items) == 20
    assert res.total_pages == 2


@pytest.mark.parametrize("page_size", [None, 0, -3])
def test_non_positive_page_size_falls_back_to_default(store, page_size):
    res = store.query(page=1, page_size=page_size)
    assert len(res.items) == 20
    assert res.total_pages == 2


def test_page_below_one_is_first_page(store):
    res = store.query(page=0, page_size=5)
    assert res.page == 1
    assert [l.id for l in res.items] == [1, 2, 3, 4, 5]


def test_no_matches(store):
    res = store.query(ListingFilters(min_price=1_000_000))
    assert res.items == []
    assert res.total == 0
    assert res.total_pages == 0


def test_get_by_id(store):
    listing = store.get_by_id(7)
    assert listing is not None
    assert listing.id == 7
    assert listing.price == 25500
    # pass-through fields come back untouched
    assert listing.model_dump()["address"] == "Test St, 7"
    assert store.get_by_id(7) is listing


def test_get_by_id_missing(store):
    assert store.get_by_id(999) is None
    assert store.get_by_id(0) is None


def test_listing_is_immutable(store):
    listing = store.get_by_id(1)
    with pytest.raises(ValidationError):
        listing.price = 1


def test_from_json_file(listings_file):
    store = ListingStore.from_json_file(listings_file)
    assert len(store) == 30
    assert isinstance(store.get_by_id(30).price, int)


def test_load_missing_file(tmp_path):
    with pytest.raises(ListingsLoadError):
        ListingStore.from_json_file(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"items": []}),
        json.dumps([{"id": 1, "price": -5, "rooms": 1}]),
        json.dumps([{"id": 1, "price": 100, "rooms": 1}, {"id": 1, "price": 200, "rooms": 2}]),
    ],
    ids=["bad-json", "not-a-list", "bad-price", "duplicate-id"],
)
def test_load_rejects_bad_documents(tmp_path, content):
    path = tmp_path / "listings.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ListingsLoadError):
        ListingStore.from_json_file(path)


def test_duplicate_ids_rejected_in_constructor():
    a = Listing(id=1, price=100, rooms=1)
    b = Listing(id=1, price=200, rooms=2)
    with pytest.raises(ListingsLoadError):
        ListingStore([a, b])


def test_store_level_default_page_size(listings_data):
    store = ListingStore((Listing.model_validate(d) for d in listings_data), default_page_size=7)
    res = store.query()
    assert len(res.items) == 7
    assert res.total_pages == 5
