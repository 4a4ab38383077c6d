# app/routers/placeholder.py
from fastapi import APIRouter, Depends, Response

from ..deps import get_placeholder_cache
from ..schemas.common import ErrorResponse
from ..services.placeholder import PlaceholderCache

router = APIRouter(tags=["placeholder"])


@router.get(
    "/placeholder/{width}/{height}",
    summary="Placeholder JPEG of the requested size",
    response_class=Response,
    responses={
        200: {"content": {"image/jpeg": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def placeholder(width: str, height: str, cache: PlaceholderCache = Depends(get_placeholder_cache)):
    # sync handler: runs in the threadpool, so a render never blocks the event loop
    data = cache.get_or_render(width, height)
    return Response(
        content=data,
        media_type="image/jpeg",
        headers={"Cache-Control": f"public, max-age={int(cache.ttl_seconds)}"},
    )
