"""
dependencies.py — FastAPI dependency injection

Provides:
    get_settings()     the Settings the app was created with
    get_database()     the shared Database handle on app.state
    require_session()  the access gate for protected routes

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_database, require_session

    @router.post("/example", dependencies=[Depends(require_session)])
    def example(db: Database = Depends(get_database)):
        ...
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request, status

from core.config import Settings
from core.security import decode_token
from core.session import CookieProfile, cookie_profile
from db.database import Database

logger = logging.getLogger(__name__)

UNAUTHORIZED_DETAIL = "unauthorized access"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cookie_profile(settings: Settings = Depends(get_settings)) -> CookieProfile:
    return cookie_profile(settings)


def get_database(request: Request) -> Database:
    """Return the Database handle created in the lifespan (or injected)."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="database not configured",
        )
    return database


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_DETAIL)


def require_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    profile: CookieProfile = Depends(get_cookie_profile),
) -> Dict[str, Any]:
    """Reject the request unless it carries a valid session cookie.

    A missing cookie and a bad token (expired, tampered, malformed) get the
    same 401 so clients cannot tell them apart. On success the decoded
    identity claim is stored on request.state.user and returned.
    """
    token = request.cookies.get(profile.name)
    if not token:
        raise _unauthorized()

    result = decode_token(token, settings.access_token_secret)
    if not result.ok:
        logger.info(
            "session token rejected",
            extra={
                "reason": result.error,
                "path": request.url.path,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        raise _unauthorized()

    request.state.user = result.claims
    return result.claims
