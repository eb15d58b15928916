from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DATABASE_URL: SQLAlchemy connection string. Default 'sqlite:///./data/todos.db'
    - PERSISTENCE_BACKEND: 'sql' (default) or 'memory'
    - APP_ENV: environment mode reported by /api/env. Default 'development'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level name. Default 'INFO'
    - REQUIRE_DONE_FOR_DELETE: 'true' to reject deleting todos that are not done (default: false)
    - HOST / PORT: bind address used by `python -m focus_board`
    """

    database_url: str
    persistence_backend: str
    environment: str
    cors_allow_origins: List[str]
    log_level: str
    require_done_for_delete: bool
    host: str
    port: int


def _env(name: str, default: str) -> str:
    # Unset and empty both mean "use the default"
    return (os.getenv(name) or "").strip() or default


def _env_flag(name: str, default: bool) -> bool:
    value = _env(name, "").lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_origins(name: str) -> List[str]:
    """'*' (the default) allows any origin; otherwise a comma-separated list."""
    value = _env(name, "*")
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    backend = _env("PERSISTENCE_BACKEND", "sql").lower()
    log_level = _env("LOG_LEVEL", "INFO").upper()

    return Settings(
        database_url=_env("DATABASE_URL", "sqlite:///./data/todos.db"),
        persistence_backend=backend if backend in {"sql", "memory"} else "sql",
        environment=_env("APP_ENV", "development"),
        cors_allow_origins=_env_origins("CORS_ALLOW_ORIGINS"),
        log_level=log_level if log_level in _LOG_LEVELS else "INFO",
        require_done_for_delete=_env_flag("REQUIRE_DONE_FOR_DELETE", False),
        host=_env("HOST", "127.0.0.1"),
        port=_env_int("PORT", 8000),
    )
