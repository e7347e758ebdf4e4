"""
conftest.py for backend/tests/

Every test gets a fresh in-memory MongoDB (mongomock) injected through
create_app(), so no server, credentials or .env file are needed.

Run from the project root:
    pytest -v
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

# Add backend/ to sys.path so `api`, `core`, `db`, `schemas` import as top-level packages.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from api.main import create_app  # noqa: E402
from core.config import Settings  # noqa: E402
from core.security import issue_token  # noqa: E402
from db.database import Database  # noqa: E402

SECRET = "test-secret-do-not-use"
MANAGER_EMAIL = "manager@example.com"


def make_settings(**overrides) -> Settings:
    values = {
        "access_token_secret": SECRET,
        "node_env": "development",
        "log_level": "DEBUG",
        "db_name": "event_manager_test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def settings():
    return make_settings()


@pytest.fixture()
def database(settings):
    db = Database(
        mongomock.MongoClient(),
        settings.db_name,
        users_collection=settings.users_collection,
        events_collection=settings.events_collection,
    )
    db.ensure_indexes()
    return db


@pytest.fixture()
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def logged_in_client(client):
    """Client whose cookie jar holds a session for MANAGER_EMAIL."""
    response = client.post("/jwt", json={"email": MANAGER_EMAIL})
    assert response.status_code == 200
    return client


@pytest.fixture()
def expired_token():
    issued = datetime.now(timezone.utc) - timedelta(days=400)
    return issue_token({"email": MANAGER_EMAIL}, SECRET, timedelta(days=365), now=issued)
