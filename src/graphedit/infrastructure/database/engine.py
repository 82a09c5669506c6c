"""Database engine setup for SQLite with WAL mode.

The DB is stored at ``{root}/{storage.directory}/{storage.filename}``
(``.graphedit/graphedit.db`` by default). SQLAlchemy Core is used
rather than the ORM: each CLI invocation is a short-lived process that
reads and writes a single row.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from graphedit.infrastructure.database.schema import metadata

DEFAULT_DIRECTORY = ".graphedit"
DEFAULT_FILENAME = "graphedit.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL journaling."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(
    root: Path,
    *,
    directory: str = DEFAULT_DIRECTORY,
    filename: str = DEFAULT_FILENAME,
) -> Engine:
    """Create the storage directory and tables under *root*.

    Idempotent — safe to call on an existing workspace.
    """
    storage_dir = root / directory
    storage_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(storage_dir / filename)
    metadata.create_all(engine)
    return engine
