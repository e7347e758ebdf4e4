"""
main.py — Event Manager API entry point

create_app() builds the FastAPI application: middleware, routers, exception
handlers and the lifespan that opens the MongoDB client. The module-level
`app` is what uvicorn/gunicorn serve.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 5000

Production (multiple worker processes):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Docs (once running):
    http://localhost:5000/docs    — Swagger UI (interactive)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException

from api.routers.auth import router as auth_router
from api.routers.events import router as events_router
from api.routers.health import router as health_router
from api.routers.users import router as users_router
from core.config import APP_VERSION as VERSION, Settings, settings as default_settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware, error_response
from db.database import Database

logger = logging.getLogger(__name__)

SERVICE_NAME = "Event Manager API"


# ---------------------------------------------------------------------------
# Lifespan — startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # ── Startup ────────────────────────────────────────────────────────────────
    if not settings.access_token_secret:
        raise RuntimeError("ACCESS_TOKEN_SECRET must be set")
    configure_logging(settings.log_level, settings.log_dir)

    if app.state.database is None:
        app.state.database = Database.from_settings(settings)
    try:
        app.state.database.ensure_indexes()
    except PyMongoError as exc:
        # Startup continues; the index is created on the next successful start.
        logger.warning("could not ensure indexes", extra={"error": str(exc)})

    logger.info(
        "%s starting",
        SERVICE_NAME,
        extra={
            "environment": settings.environment,
            "version": VERSION,
            "port": settings.port,
            "db_name": settings.db_name,
            "allowed_origins": settings.allowed_origins,
        },
    )
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    app.state.database.close()
    logger.info("%s shutting down", SERVICE_NAME)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

async def http_exception_handler(request: Request, exc: HTTPException):
    """Return structured JSON for all HTTP errors (400, 401, 404, ...)."""
    return error_response(
        exc.status_code,
        exc.detail,
        getattr(request.state, "request_id", None),
        headers=getattr(exc, "headers", None),
    )


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Build the application.

    `database` is normally left out and opened in the lifespan; tests pass
    one backed by mongomock.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=SERVICE_NAME,
        description="Users, roles and event records for the event-management frontend.",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Middleware (last added = outermost):
    #   request:  CORS → RequestID → Timing → route handler
    #   response: route handler → Timing → RequestID → CORS
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HTTPException, http_exception_handler)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(events_router)
    app.include_router(users_router)

    @app.get("/", tags=["root"], summary="API root")
    def root():
        """Confirms the API is running."""
        return {"service": SERVICE_NAME, "version": VERSION, "status": "running"}

    return app


app = create_app()
