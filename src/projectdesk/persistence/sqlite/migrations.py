"""SQLite migrations for projectdesk."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import Engine, text

from .models import Base

Migration = Callable[[Engine], None]

SCHEMA_VERSION = 1


def _initial_migration(engine: Engine) -> None:
    with engine.begin() as conn:
        Base.metadata.create_all(conn)
        conn.execute(
            text(
                "CREATE TABLE IF NOT EXISTS projectdesk_schema_migrations "
                "(version INTEGER PRIMARY KEY)"
            )
        )
        current = conn.execute(
            text("SELECT MAX(version) FROM projectdesk_schema_migrations")
        ).scalar()
        if current is None:
            conn.execute(
                text("INSERT INTO projectdesk_schema_migrations (version) VALUES (:version)"),
                {"version": SCHEMA_VERSION},
            )


MIGRATIONS: tuple[Migration, ...] = (_initial_migration,)


def apply_migrations(engine: Engine) -> None:
    for migration in MIGRATIONS:
        migration(engine)


def schema_version(engine: Engine) -> int | None:
    with engine.connect() as conn:
        return conn.execute(
            text("SELECT MAX(version) FROM projectdesk_schema_migrations")
        ).scalar()


__all__ = ["SCHEMA_VERSION", "apply_migrations", "schema_version"]
