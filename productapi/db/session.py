"""Engine/session helpers for the SQL backend.

The engine is built lazily from ``DATABASE_URL`` and cached for the process;
``reset_engine`` drops it so the next call picks up a changed environment.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from productapi.core.config import get_settings

Base = declarative_base()


def _engine_options(url: str) -> dict:
    options: dict = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a thread pool
        options["connect_args"] = {"check_same_thread": False}
    return options


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    url = (settings.database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, echo=settings.sql_echo, **_engine_options(url))


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)


def reset_engine() -> None:
    """Dispose the cached engine (if any) and forget cached settings."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    _get_sessionmaker.cache_clear()
    get_engine.cache_clear()
    get_settings.cache_clear()


@contextmanager
def get_session() -> Session:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
