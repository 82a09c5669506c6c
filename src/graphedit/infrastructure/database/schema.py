"""SQLAlchemy Core table definitions for the graphedit database.

The editor persists one JSON document per key, so the schema is a
single key-value table.
"""

from __future__ import annotations

from sqlalchemy import Column, MetaData, Table, Text

metadata = MetaData()

kv_store = Table(
    "kv_store",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),  # JSON document
    Column("updated", Text, nullable=False),  # ISO 8601 UTC
)
