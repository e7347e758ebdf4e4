"""api/routers/auth.py — Session endpoints.

Routes:
    POST /jwt       Sign the posted identity claim and set the session cookie
    GET  /logout    Clear the session cookie
"""

from __future__ import annotations

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_cookie_profile, get_settings
from core.config import Settings
from core.security import issue_token
from core.session import CookieProfile, clear_session_cookie, set_session_cookie
from schemas.auth import IdentityClaim
from schemas.shared import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=SuccessResponse, summary="Start a session")
def create_session(
    claim: IdentityClaim,
    response: Response,
    settings: Settings = Depends(get_settings),
    profile: CookieProfile = Depends(get_cookie_profile),
):
    token = issue_token(
        claim.to_claims(),
        settings.access_token_secret,
        ttl=timedelta(days=settings.access_token_ttl_days),
    )
    set_session_cookie(response, token, profile)
    logger.info("session issued", extra={"email": claim.email})
    return SuccessResponse()


@router.get("/logout", response_model=SuccessResponse, summary="End the session")
def end_session(response: Response, profile: CookieProfile = Depends(get_cookie_profile)):
    clear_session_cookie(response, profile)
    return SuccessResponse()
