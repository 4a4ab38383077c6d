"""Exception types and the JSON error handlers that map them to responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RentalsError(Exception):
    """Base exception carrying the HTTP status it maps to."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InvalidDimensionsError(RentalsError):
    def __init__(self, message: str = "invalid dimensions"):
        super().__init__(message, status_code=400)


class RenderFailureError(RentalsError):
    def __init__(self, message: str = "error generating image"):
        super().__init__(message, status_code=500)


class ListingNotFoundError(RentalsError):
    def __init__(self, message: str = "not found"):
        super().__init__(message, status_code=404)


class ListingsLoadError(RuntimeError):
    """The listing collection could not be loaded. Fatal at startup."""


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RentalsError)
    async def handle_rentals_error(request: Request, exc: RentalsError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)
