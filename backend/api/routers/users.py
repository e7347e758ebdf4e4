"""api/routers/users.py — User endpoints.

Routes:
    POST /users/{email}          Create the user once; later calls return it unchanged (session required)
    GET  /users                  List all users
    GET  /users/role/{email}     {"role": ...}, null for unknown users
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_database, require_session
from db import crud
from db.database import Database
from schemas.user import RoleResponse, UserProfile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/{email}", dependencies=[Depends(require_session)], summary="Register user")
def register_user(
    email: str,
    profile: Optional[UserProfile] = None,
    db: Database = Depends(get_database),
):
    document = profile.to_document() if profile is not None else {}
    created, body = crud.create_user(db.users, email, document)
    if created:
        logger.info("user registered", extra={"email": email, "role": crud.DEFAULT_ROLE})
    return body


@router.get("", summary="List users")
def list_users(db: Database = Depends(get_database)):
    return crud.list_users(db.users)


@router.get("/role/{email}", response_model=RoleResponse, summary="Get user role")
def get_user_role(email: str, db: Database = Depends(get_database)):
    return RoleResponse(role=crud.get_user_role(db.users, email))
