"""
Environment-driven settings.

Environment variables:
    DATABASE_URL: Postgres DSN (required once the pool is opened)
    DB_POOL_MIN_SIZE: Minimum pool connections (default: 1)
    DB_POOL_MAX_SIZE: Maximum pool connections (default: 5)
    DB_COMMAND_TIMEOUT: Per-statement timeout in seconds (default: 30)
    CORS_ORIGINS: Comma-separated allowed origins (default: *)
    LOG_LEVEL: Root log level (default: INFO)
    LOG_FORMAT: "text" or "json" (default: text)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_list(name: str, default: str) -> list[str]:
    raw = _env_str(name, default)
    if raw == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str | None = None
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout: int = 30
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create a Settings instance populated from environment variables."""
        min_size = max(_env_int("DB_POOL_MIN_SIZE", 1), 0)
        max_size = max(_env_int("DB_POOL_MAX_SIZE", 5), 1)
        return cls(
            database_url=os.environ.get("DATABASE_URL", "").strip() or None,
            db_pool_min_size=min(min_size, max_size),
            db_pool_max_size=max_size,
            db_command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
            cors_origins=_env_list("CORS_ORIGINS", "*"),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            log_format=_env_str("LOG_FORMAT", "text").lower(),
        )
