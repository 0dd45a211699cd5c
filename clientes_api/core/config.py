"""
Configuration helpers for the Clientes API.

Settings are read once from environment variables and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_DATABASE_URL = "sqlite:///./clientes.db"
DEV_ORIGINS = (
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _list(value: str | None) -> list[str]:
        if not value:
            return []
        return [item.strip().rstrip("/") for item in value.split(",") if item.strip()]

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    origins = _list(os.getenv("CORS_ORIGINS"))
    if app_env != "prod":
        origins.extend(origin for origin in DEV_ORIGINS if origin not in origins)

    return Settings(
        app_env=app_env,
        database_url=(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL).strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=tuple(origins),
    )
