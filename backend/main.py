"""
main.py — Convenience entry point for the Event Manager backend.

The FastAPI application is built by create_app() in api/main.py.
This file re-exports `app` so uvicorn can be invoked from backend/ as:

    uvicorn main:app --reload --port 5000
"""

from api.main import app  # noqa: F401  (re-export)
