"""core/security.py — Signed session tokens (HS256 JWT via PyJWT).

issue_token() signs an identity claim with the server secret;
decode_token() verifies one and returns a TokenResult rather than raising,
so callers branch on `result.ok` instead of catching PyJWT exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

import jwt

JWT_ALGORITHM = "HS256"

# Claims are caller-chosen; only the signature, exp and nbf are enforced.
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}
DEFAULT_TOKEN_TTL = timedelta(days=365)


class MissingSecretError(RuntimeError):
    """ACCESS_TOKEN_SECRET is not configured."""


@dataclass(frozen=True)
class TokenResult:
    claims: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.claims is not None


def _require_secret(secret: str) -> str:
    if not secret:
        raise MissingSecretError("ACCESS_TOKEN_SECRET is not configured")
    return secret


def issue_token(
    claims: Mapping[str, Any],
    secret: str,
    ttl: timedelta = DEFAULT_TOKEN_TTL,
    *,
    now: Optional[datetime] = None,
) -> str:
    """Sign `claims` into a JWT valid for `ttl`.

    `iat` and `exp` are always set here and replace any caller-supplied values.
    """
    _require_secret(secret)
    issued_at = now or datetime.now(timezone.utc)
    payload: Dict[str, Any] = dict(claims)
    payload["iat"] = int(issued_at.timestamp())
    payload["exp"] = int((issued_at + ttl).timestamp())
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: str) -> TokenResult:
    _require_secret(secret)
    if not token:
        return TokenResult(error="token_blank")
    try:
        claims = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM], options=_DECODE_OPTIONS)
    except jwt.ExpiredSignatureError:
        return TokenResult(error="token_expired")
    except jwt.InvalidSignatureError:
        return TokenResult(error="token_bad_signature")
    except jwt.InvalidTokenError:
        return TokenResult(error="token_invalid")
    return TokenResult(claims=claims)
