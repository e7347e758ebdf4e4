"""Data access for the users and events collections.

Each function issues exactly one database call (user creation may issue a
second lookup when it loses an insert race). Documents come back with
ObjectId values rendered as strings so FastAPI can encode them.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Mapping, Optional, Tuple

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

DEFAULT_ROLE = "eventManager"
MANAGER_EMAIL_FIELD = "eventManager.email"


def serialize(value: Any) -> Any:
    """Recursively replace ObjectId values with their hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Mapping):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize(v) for v in value]
    return value


def _insert_result(result) -> Dict[str, Any]:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def insert_event(events: Collection, document: Mapping[str, Any]) -> Dict[str, Any]:
    # insert_one stamps _id onto the dict it is given
    return _insert_result(events.insert_one(dict(document)))


def list_events(events: Collection) -> List[Dict[str, Any]]:
    return [serialize(doc) for doc in events.find()]


def list_events_by_manager(events: Collection, email: str) -> List[Dict[str, Any]]:
    return [serialize(doc) for doc in events.find({MANAGER_EMAIL_FIELD: email})]


def get_event(events: Collection, event_id: ObjectId) -> Optional[Dict[str, Any]]:
    doc = events.find_one({"_id": event_id})
    return serialize(doc) if doc is not None else None


def update_event(events: Collection, event_id: ObjectId, fields: Mapping[str, Any]) -> int:
    """$set `fields` on one event; returns the matched count."""
    changes = {k: v for k, v in fields.items() if k != "_id"}
    result = events.update_one({"_id": event_id}, {"$set": changes})
    return result.matched_count


def delete_event(events: Collection, event_id: ObjectId) -> Dict[str, Any]:
    result = events.delete_one({"_id": event_id})
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def find_user(users: Collection, email: str) -> Optional[Dict[str, Any]]:
    doc = users.find_one({"email": email})
    return serialize(doc) if doc is not None else None


def create_user(
    users: Collection,
    email: str,
    profile: Mapping[str, Any],
) -> Tuple[bool, Dict[str, Any]]:
    """Insert a user unless one with `email` exists.

    Returns (created, body): the insert result when created, otherwise the
    stored record untouched.
    """
    existing = find_user(users, email)
    if existing is not None:
        return False, existing

    document = {
        **{k: v for k, v in profile.items() if k != "_id"},
        "email": email,
        "role": DEFAULT_ROLE,
        "timestamp": int(time.time() * 1000),
    }
    try:
        result = users.insert_one(document)
    except DuplicateKeyError:
        # Another request registered the same email between the lookup and the insert.
        winner = find_user(users, email)
        if winner is None:
            raise
        return False, winner
    return True, _insert_result(result)


def list_users(users: Collection) -> List[Dict[str, Any]]:
    return [serialize(doc) for doc in users.find()]


def get_user_role(users: Collection, email: str) -> Optional[str]:
    doc = users.find_one({"email": email}, {"role": 1})
    return doc.get("role") if doc is not None else None
