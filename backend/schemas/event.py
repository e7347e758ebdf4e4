"""schemas/event.py — Event request schema.

Event documents are free-form. The one field the API reads is the owner,
eventManager.email, matched exactly by GET /my-events.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class EventDocument(BaseModel):
    """Body of POST /events and PUT /events/{id}. All fields are kept."""
    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()
