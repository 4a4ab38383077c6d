# app/main.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.errors import register_error_handlers
from .core.logging import configure_logging
from .routers import health, listings, placeholder
from .services.listings import ListingStore
from .services.placeholder import PlaceholderCache, PlaceholderRenderer

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the app with its process-wide state.

    The listing file is loaded here, once; a ListingsLoadError propagates and
    stops startup.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Rentals API", version="1.0.0")
    app.state.settings = settings
    app.state.store = ListingStore.from_json_file(
        settings.listings_path, default_page_size=settings.default_page_size
    )
    app.state.placeholder_cache = PlaceholderCache(
        PlaceholderRenderer(
            quality=settings.placeholder_quality,
            font_path=settings.placeholder_font_path,
        ),
        ttl_seconds=settings.placeholder_ttl_seconds,
        max_items=settings.placeholder_max_items,
        max_dimension=settings.placeholder_max_dimension,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Routers
    for router in (health.router, listings.router, placeholder.router):
        app.include_router(router)
        if settings.api_prefix:
            app.include_router(router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    def root():
        return {"service": "rentals-api"}

    logger.info("Rentals API ready (%d listings)", len(app.state.store))
    return app


app = create_app()
