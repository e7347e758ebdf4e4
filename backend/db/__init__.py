"""Database package for the Event Manager API."""

from .database import Database, check_db_connectivity
from .crud import DEFAULT_ROLE, MANAGER_EMAIL_FIELD, serialize

__all__ = [
    "Database",
    "check_db_connectivity",
    "DEFAULT_ROLE",
    "MANAGER_EMAIL_FIELD",
    "serialize",
]
