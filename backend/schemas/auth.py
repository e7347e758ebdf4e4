"""schemas/auth.py — Identity claim signed into the session token."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class IdentityClaim(BaseModel):
    """In practice {"email": ...}; any extra JSON fields are signed as well."""
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None

    def to_claims(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
