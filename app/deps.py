# app/deps.py
from fastapi import Request

from app.services.listings import ListingStore
from app.services.placeholder import PlaceholderCache

def get_store(request: Request) -> ListingStore:
    """The listing collection loaded by create_app()."""
    return request.app.state.store

def get_placeholder_cache(request: Request) -> PlaceholderCache:
    return request.app.state.placeholder_cache
