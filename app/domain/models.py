from __future__ import annotations

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class Listing(BaseModel):
    # only id/price/rooms are inspected; everything else passes through untouched
    model_config = ConfigDict(extra="allow", frozen=True)

    id: int = Field(..., ge=1)
    price: Union[int, float] = Field(..., gt=0)
    rooms: int = Field(..., gt=0)

class ListingFilters(BaseModel):
    """Inclusive bounds on price and rooms. None means unconstrained on that side."""
    model_config = ConfigDict(frozen=True)

    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rooms: Optional[float] = None
    max_rooms: Optional[float] = None

    def matches(self, listing: Listing) -> bool:
        if self.min_price is not None and listing.price < self.min_price:
            return False
        if self.max_price is not None and listing.price > self.max_price:
            return False
        if self.min_rooms is not None and listing.rooms < self.min_rooms:
            return False
        if self.max_rooms is not None and listing.rooms > self.max_rooms:
            return False
        return True

class ListingPage(BaseModel):
    items: list[Listing]
    total: int
    page: int
    total_pages: int
