"""
Configuration helpers for the product API.

Settings are read once from environment variables and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    sql_echo: bool
    auto_create_tables: bool
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./products.db").strip(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
