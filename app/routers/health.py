from fastapi import APIRouter, Depends, Response

from ..deps import get_placeholder_cache, get_store
from ..services.listings import ListingStore
from ..services.placeholder import PlaceholderCache

router = APIRouter(tags=["health"])

@router.get("/ping")
def ping():
    return {"pong": True}

@router.get("/health")
def health(
    store: ListingStore = Depends(get_store),
    cache: PlaceholderCache = Depends(get_placeholder_cache),
):
    return {"status": "ok", "listings": len(store), "placeholder_cache": cache.stats()}

@router.head("/")
def head_root():
    return Response(status_code=200)
