"""core/config.py — Application configuration via Pydantic BaseSettings.

Loads environment variables from .env (and the OS environment).
Import `settings` from this module wherever configuration is needed.

Usage:
    from core.config import settings

    uri = settings.database_uri
    if settings.is_production:
        ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "1.0.0"

# .env lives in the project root (one level above backend/)
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    port: int = 5000
    node_env: str = "development"

    # Database (MongoDB Atlas)
    db_user: str = ""
    db_pass: str = ""
    db_cluster_host: str = "cluster0.hwao6.mongodb.net"
    db_app_name: str = "Cluster0"
    db_name: str = "swissMoto"
    users_collection: str = "users"
    events_collection: str = "classes"
    # Full URI override, e.g. mongodb://localhost:27017 for local work
    mongodb_uri: Optional[str] = None

    # Driver timeouts (milliseconds); None keeps the pymongo default
    mongo_server_selection_timeout_ms: int = 5000
    mongo_connect_timeout_ms: int = 10000
    mongo_socket_timeout_ms: Optional[int] = None

    # Auth
    access_token_secret: str = ""
    access_token_ttl_days: int = 365
    session_cookie_name: str = "token"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # CORS — list of allowed origins for the React frontend
    allowed_origins: list[str] = [
        "http://localhost:5173",                  # Vite dev server
        "https://edu-management-system.surge.sh",
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def environment(self) -> str:
        return self.node_env.lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def database_uri(self) -> str:
        """Connection string, composed from the Atlas credentials unless overridden."""
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_cluster_host}/?retryWrites=true&w=majority&appName={self.db_app_name}"
        )


# Singleton — import this everywhere
settings = Settings()
