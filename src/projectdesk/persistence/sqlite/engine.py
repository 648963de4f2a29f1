"""Engine and session factory construction for the SQLite adapter."""

from __future__ import annotations

import threading
import weakref

from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .migrations import apply_migrations

_migration_lock = threading.Lock()
_migrated_engines: weakref.WeakSet[Engine] = weakref.WeakSet()


def is_memory_url(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _ensure_migrated(engine: Engine) -> None:
    with _migration_lock:
        if engine in _migrated_engines:
            return
        apply_migrations(engine)
        _migrated_engines.add(engine)


def create_engine_for(database_url: str) -> Engine:
    """Create an engine; in-memory databases keep one shared connection."""

    if is_memory_url(database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create an engine for ``database_url``, migrate it once and return a session factory."""

    engine = create_engine_for(database_url)
    _ensure_migrated(engine)
    return sessionmaker(engine, expire_on_commit=False)


__all__ = ["create_engine_for", "create_session_factory", "is_memory_url"]
