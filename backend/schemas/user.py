"""schemas/user.py — User request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Body of POST /users/{email}; whatever the client knows about the user."""
    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()


class RoleResponse(BaseModel):
    role: Optional[str] = None
