"""Workspace — the storage a GraphModel is loaded from and saved to.

Owns the SQLite engine and the persistence adapter for one root
directory. Created by the entry point and closed when it exits.

INVARIANT: Opening a workspace never fails on an unreadable database
file. The file is moved to ``{storage.directory}/backups/`` and a fresh
database is created, so the model starts from the seed graph.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from graphedit.infrastructure.database.engine import init_database
from graphedit.infrastructure.persistence import SqlitePersistence

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from graphedit.config.settings import GraphSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Database-backed storage rooted at ``settings.root``."""

    def __init__(self, settings: GraphSettings) -> None:
        self._settings = settings
        self._engine = self._open()
        self.persistence = SqlitePersistence(self._engine, key=settings.storage.key)

    @property
    def root(self) -> Path:
        return self._settings.root

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def db_path(self) -> Path:
        storage = self._settings.storage
        return self.root / storage.directory / storage.filename

    def close(self) -> None:
        """Release pooled database connections."""
        self._engine.dispose()

    def _open(self) -> Engine:
        storage = self._settings.storage
        try:
            return init_database(
                self.root, directory=storage.directory, filename=storage.filename
            )
        except SQLAlchemyError:
            moved = self._quarantine()
            logger.warning(
                "Unreadable database %s moved to %s; starting from an empty store",
                self.db_path,
                moved,
                exc_info=True,
            )
        return init_database(self.root, directory=storage.directory, filename=storage.filename)

    def _quarantine(self) -> Path:
        """Move the database file (and its WAL sidecars) into ``backups/``."""
        db_path = self.db_path
        backup_dir = db_path.parent / "backups"
        backup_dir.mkdir(exist_ok=True)
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S%f")
        target = backup_dir / f"{db_path.stem}-corrupt-{stamp}{db_path.suffix}"
        for suffix in ("", "-wal", "-shm"):
            path = db_path.with_name(db_path.name + suffix)
            if path.exists():
                path.replace(target.with_name(target.name + suffix))
        return target
