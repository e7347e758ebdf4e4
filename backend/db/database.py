"""Database connection handle.

A single pymongo MongoClient is shared by all requests (the driver pools
connections). It lives on app.state.database and reaches handlers through
api.dependencies.get_database, so tests can inject mongomock instead.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.server_api import ServerApi

from core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """Named database plus the two collections the API works with."""

    def __init__(
        self,
        client: Any,
        name: str,
        *,
        users_collection: str = "users",
        events_collection: str = "classes",
        owns_client: bool = False,
    ) -> None:
        self.client = client
        self.name = name
        self._db = client[name]
        self._users_name = users_collection
        self._events_name = events_collection
        self._owns_client = owns_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a real MongoClient (Stable API v1, strict) from settings."""
        client_kwargs: Dict[str, Any] = {
            "server_api": ServerApi("1", strict=True, deprecation_errors=True),
            "serverSelectionTimeoutMS": settings.mongo_server_selection_timeout_ms,
            "connectTimeoutMS": settings.mongo_connect_timeout_ms,
        }
        if settings.mongo_socket_timeout_ms is not None:
            client_kwargs["socketTimeoutMS"] = settings.mongo_socket_timeout_ms

        client = MongoClient(settings.database_uri, **client_kwargs)
        logger.info(
            "MongoDB client created",
            extra={"db_name": settings.db_name, "cluster": settings.db_cluster_host},
        )
        return cls(
            client,
            settings.db_name,
            users_collection=settings.users_collection,
            events_collection=settings.events_collection,
            owns_client=True,
        )

    @property
    def users(self) -> Collection:
        return self._db[self._users_name]

    @property
    def events(self) -> Collection:
        return self._db[self._events_name]

    def ensure_indexes(self) -> None:
        """Email uniquely identifies a user."""
        self.users.create_index([("email", ASCENDING)], unique=True, name="email_unique")

    def ping(self) -> bool:
        """Round-trip to the server; raises on failure."""
        self.client.admin.command("ping")
        return True

    def close(self, force: bool = False) -> None:
        """Close the client if this handle created it (or if forced)."""
        if self._owns_client or force:
            self.client.close()


def check_db_connectivity(database: Optional[Database]) -> bool:
    """Ping the database.

    Returns:
        True if the database responds.

    Raises:
        RuntimeError: with a descriptive message if the ping fails.
    """
    if database is None:
        raise RuntimeError("Database connectivity check failed: no database configured")
    try:
        return database.ping()
    except Exception as exc:
        raise RuntimeError(f"Database connectivity check failed: {exc}") from exc
