"""Application factory for the card server."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from cardserver.core.config import Settings, get_settings
from cardserver.core.logging_config import setup_logging
from cardserver.db.session import Database
from cardserver.repositories.card_repository import CardRepository
from cardserver.routers import cards as cards_router
from cardserver.services.card_service import CardService

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than the limit.

    A declared Content-Length is checked up front; chunked bodies without one
    are read (and cached for the route) before being measured.
    """

    def __init__(self, app, *, max_body_bytes: int) -> None:
        super().__init__(app)
        self._max_body_bytes = max_body_bytes

    def _too_large(self) -> JSONResponse:
        return JSONResponse(
            {"error": "Payload too large"},
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    async def dispatch(self, request, call_next):
        declared = request.headers.get("content-length")
        if declared and declared.isdigit():
            if int(declared) > self._max_body_bytes:
                return self._too_large()
        elif request.method in ("POST", "PUT", "PATCH"):
            if len(await request.body()) > self._max_body_bytes:
                return self._too_large()
        return await call_next(request)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if where:
        message = f"{where}: {message}"
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


def health() -> dict:
    return {"ok": True}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; storage is opened on startup and closed on shutdown."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    database = Database(settings.storage_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.open()
        app.state.card_service = CardService(CardRepository(database))
        try:
            yield
        finally:
            app.state.card_service = None
            database.close()

    app = FastAPI(title="TCG Card API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.add_api_route("/health", health, methods=["GET"])
    app.add_api_route("/_health", health, methods=["GET"], include_in_schema=False)

    # /api/cards mantido para clientes antigos
    app.include_router(cards_router.router, prefix="/cards", tags=["cards"])
    app.include_router(cards_router.router, prefix="/api/cards", tags=["cards"], include_in_schema=False)

    # Must come last: "/" would shadow every route registered after it.
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
        logger.debug("Serving static front-end from %s", settings.static_dir)

    return app


app = create_app()
