"""api/routers/events.py — Event endpoints.

Routes:
    POST   /events          Insert an event document          (session required)
    GET    /events          List all events
    GET    /events/{id}     Single event; 400 bad id, 404 absent
    PUT    /events/{id}     $set partial update; 404 if no match (session required)
    DELETE /events/{id}     Delete one event                   (session required)
    GET    /my-events       Events whose eventManager.email equals ?email=
"""

from __future__ import annotations

import logging
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_database, require_session
from db import crud
from db.database import Database
from schemas.event import EventDocument
from schemas.shared import DeleteResult, InsertResult, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])

# Every route that writes to the events collection goes through the gate.
_protected = [Depends(require_session)]


def parse_event_id(event_id: str) -> ObjectId:
    if not ObjectId.is_valid(event_id):
        raise HTTPException(status_code=400, detail="Invalid event ID")
    return ObjectId(event_id)


@router.post("/events", response_model=InsertResult, dependencies=_protected, summary="Create event")
def create_event(event: EventDocument, db: Database = Depends(get_database)):
    result = crud.insert_event(db.events, event.to_document())
    logger.info("event created", extra={"event_id": result["insertedId"]})
    return result


@router.get("/events", summary="List events")
def list_events(db: Database = Depends(get_database)):
    return crud.list_events(db.events)


@router.get("/events/{event_id}", summary="Get event")
def get_event(event_id: str, db: Database = Depends(get_database)):
    oid = parse_event_id(event_id)
    event = crud.get_event(db.events, oid)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.put(
    "/events/{event_id}",
    response_model=MessageResponse,
    dependencies=_protected,
    summary="Update event",
)
def update_event(event_id: str, changes: EventDocument, db: Database = Depends(get_database)):
    oid = parse_event_id(event_id)
    fields = {k: v for k, v in changes.to_document().items() if k != "_id"}
    if not fields:
        raise HTTPException(status_code=400, detail="Update body must not be empty")

    matched = crud.update_event(db.events, oid, fields)
    if matched == 0:
        raise HTTPException(status_code=404, detail="Event not found")
    return MessageResponse(success=True, message="Event updated successfully")


@router.delete(
    "/events/{event_id}",
    response_model=DeleteResult,
    dependencies=_protected,
    summary="Delete event",
)
def delete_event(event_id: str, db: Database = Depends(get_database)):
    oid = parse_event_id(event_id)
    result = crud.delete_event(db.events, oid)
    logger.info("event deleted", extra={"event_id": event_id, "deleted": result["deletedCount"]})
    return result


@router.get("/my-events", summary="List events owned by a manager")
def list_my_events(
    email: Optional[str] = Query(None, description="Manager email, matched exactly"),
    db: Database = Depends(get_database),
):
    if not email:
        raise HTTPException(status_code=400, detail="Email query parameter is required")
    return crud.list_events_by_manager(db.events, email)
