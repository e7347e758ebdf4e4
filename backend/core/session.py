"""core/session.py — The session cookie that carries the access token.

Setting and clearing must use identical attributes, otherwise some browsers
keep the old cookie. Both go through one CookieProfile built from settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from starlette.responses import Response

from core.config import Settings


@dataclass(frozen=True)
class CookieProfile:
    name: str = "token"
    httponly: bool = True
    secure: bool = False
    samesite: str = "strict"
    path: str = "/"


def cookie_profile(settings: Settings) -> CookieProfile:
    """Development: Secure off, SameSite=strict. Production: Secure on, SameSite=none."""
    if settings.is_production:
        return CookieProfile(name=settings.session_cookie_name, secure=True, samesite="none")
    return CookieProfile(name=settings.session_cookie_name, secure=False, samesite="strict")


def set_session_cookie(response: Response, token: str, profile: CookieProfile) -> None:
    response.set_cookie(
        key=profile.name,
        value=token,
        httponly=profile.httponly,
        secure=profile.secure,
        samesite=profile.samesite,
        path=profile.path,
    )


def clear_session_cookie(response: Response, profile: CookieProfile) -> None:
    response.delete_cookie(
        key=profile.name,
        httponly=profile.httponly,
        secure=profile.secure,
        samesite=profile.samesite,
        path=profile.path,
    )
