"""SQLite key-value store via SQLAlchemy Core."""

from graphedit.infrastructure.database.engine import create_db_engine, init_database
from graphedit.infrastructure.database.schema import kv_store, metadata

__all__ = [
    "create_db_engine",
    "init_database",
    "kv_store",
    "metadata",
]
