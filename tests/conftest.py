import json

import pytest

from app.core.config import Settings
from app.domain.models import Listing
from app.services.listings import ListingStore


def _make_listing(i: int) -> dict:
    return {
        "id": i,
        "title": f"{1 + i % 4}-room apartment",
        "address": f"Test St, {i}",
        "rooms": 1 + i % 4,
        "price": 15000 + i * 1500,
        "location": {"lat": 47.2 + i / 1000, "lng": 39.7},
        "photos": ["/api/placeholder/800/600"],
        "contact": {"name": "Test Owner", "phone": "+7 000 000 00 00"},
    }


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def listings_data():
    # prices 16500..60000 step 1500, rooms cycle 2,3,4,1
    return [_make_listing(i) for i in range(1, 31)]


@pytest.fixture
def store(listings_data):
    return ListingStore(Listing.model_validate(d) for d in listings_data)


@pytest.fixture
def listings_file(tmp_path, listings_data):
    path = tmp_path / "listings.json"
    path.write_text(json.dumps(listings_data), encoding="utf-8")
    return path


@pytest.fixture
def settings(listings_file):
    return Settings(listings_path=listings_file)


@pytest.fixture
def clock():
    return FakeClock()
