"""api/routers/health.py — Health check endpoints.

Routes:
    GET /health        Liveness check — returns env, version, timestamp
    GET /health/db     Readiness check — pings MongoDB
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_settings
from core.config import APP_VERSION, Settings
from db.database import check_db_connectivity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check")
def health(settings: Settings = Depends(get_settings)):
    """Returns environment, version, and current UTC timestamp."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/db", summary="Readiness check")
def health_db(request: Request):
    """Pings the database. HTTP 200 when reachable, HTTP 503 when not.

    Reads app.state directly rather than through get_database so a missing
    handle reports 503 with a body instead of an error.
    """
    try:
        check_db_connectivity(getattr(request.app.state, "database", None))
    except RuntimeError as exc:
        logger.warning("health/db: database unreachable: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": str(exc)},
        )
    logger.debug("health/db: database reachable")
    return {"status": "ok", "db": "connected"}
