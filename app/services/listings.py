# app/services/listings.py
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from pydantic import ValidationError

from ..core.errors import ListingsLoadError
from ..domain.models import Listing, ListingFilters, ListingPage

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class ListingStore:
    """
    Immutable, in-memory listing collection.

    Loaded once at startup and only read afterwards, so request threads can
    share it without locking.
    """

    def __init__(self, listings: Iterable[Listing], default_page_size: int = DEFAULT_PAGE_SIZE):
        self.default_page_size = default_page_size if default_page_size > 0 else DEFAULT_PAGE_SIZE
        self._listings: Tuple[Listing, ...] = tuple(listings)
        self._by_id: Dict[int, Listing] = {}
        for listing in self._listings:
            if listing.id in self._by_id:
                raise ListingsLoadError(f"duplicate listing id {listing.id}")
            self._by_id[listing.id] = listing

    @classmethod
    def from_json_file(cls, path: Union[str, Path], **kwargs) -> "ListingStore":
        """Load a JSON array of listings. Any problem raises ListingsLoadError."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise ListingsLoadError(f"cannot read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ListingsLoadError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(raw, list):
            raise ListingsLoadError(f"{path}: expected a JSON array, got {type(raw).__name__}")

        try:
            listings = [Listing.model_validate(item) for item in raw]
        except ValidationError as e:
            raise ListingsLoadError(f"{path}: invalid listing record: {e}") from e

        store = cls(listings, **kwargs)
        logger.info("Loaded %d listings from %s", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self._listings)

    def query(
        self,
        filters: Optional[ListingFilters] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> ListingPage:
        """
        Filter (stable, insertion order) then slice one page.

        `page` is 1-based; an offset past the end gives an empty page, not an
        error. `total` counts every match, not just the page.
        """
        filters = filters or ListingFilters()
        if page_size is None or page_size <= 0:
            page_size = self.default_page_size
        page = max(page, 1)

        matched = [l for l in self._listings if filters.matches(l)]
        start = (page - 1) * page_size
        items = matched[start:start + page_size]

        total = len(matched)
        return ListingPage(
            items=items,
            total=total,
            page=page,
            total_pages=math.ceil(total / max(page_size, 1)),
        )

    def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Exact id match; None when absent."""
        return self._by_id.get(listing_id)
