"""
app.py
------
FastAPI application factory.

The storage handles are injected here rather than imported as globals,
so tests can build the same app around in-memory fakes.
"""

from contextlib import asynccontextmanager

import psycopg2
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from handlers.responses import error
from routes import setup_routes
from services.errors import SkillConflictError, SkillNotFoundError
from services.skill_service import SkillService
from utils.logger import get_logger

logger = get_logger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request body"


def _install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(SkillNotFoundError)
    async def _not_found(request: Request, exc: SkillNotFoundError):
        return error(exc.message, 404)

    @app.exception_handler(SkillConflictError)
    async def _conflict(request: Request, exc: SkillConflictError):
        return error(exc.message, 409)

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError):
        return error(_format_validation_errors(exc), 400)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return error(str(exc.detail), exc.status_code)

    @app.exception_handler(psycopg2.Error)
    async def _storage_error(request: Request, exc: psycopg2.Error):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
        return error("Storage error", 500)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error("Internal server error", 500)


def create_app(service: SkillService, database=None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        service: SkillService used by every skill handler.
        database: Storage handle used by /health and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Skills API is running!")
        yield
        logger.info("Shutting down...")
        if database is not None:
            database.close()

    app = FastAPI(
        title="Skills API",
        description="CRUD API for skills",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.skill_service = service
    app.state.database = database

    _install_exception_handlers(app)
    setup_routes(app)
    return app
