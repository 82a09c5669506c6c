"""Persistence adapters for graph state.

GraphModel talks to storage through the two-method
:class:`PersistenceAdapter` protocol. Both shipped adapters store the
state as one JSON document under a single key.

INVARIANT: Adapters never raise. Unreadable state loads as None (the
model then falls back to the seed graph) and failed writes are logged
and dropped; the in-memory model stays authoritative.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError

from graphedit.domain.types import GraphState
from graphedit.infrastructure.database.schema import kv_store

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

DEFAULT_KEY = "graph-storage"


class PersistenceAdapter(Protocol):
    """Storage contract consumed by GraphModel."""

    def load(self) -> GraphState | None: ...

    def save(self, state: GraphState) -> None: ...


def decode_state(raw: str | None, *, source: str) -> GraphState | None:
    """Parse a stored JSON document, returning None if it is unusable.

    Edges that point at nodes missing from the document are dropped so
    the loaded state never references absent nodes.
    """
    if raw is None:
        return None
    try:
        state = GraphState.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "Discarding unreadable graph state from %s (%d errors)",
            source,
            exc.error_count(),
        )
        return None

    node_ids = {node.id for node in state.nodes}
    kept = [e for e in state.edges if e.source in node_ids and e.target in node_ids]
    if len(kept) != len(state.edges):
        logger.warning(
            "Dropped %d dangling edge(s) from %s",
            len(state.edges) - len(kept),
            source,
        )
        state = state.model_copy(update={"edges": kept})
    return state


def encode_state(state: GraphState) -> str:
    return state.model_dump_json()


class MemoryPersistence:
    """Dict-backed key-value adapter.

    Values are kept as raw JSON strings so the round trip exercises the
    same encode/decode path as the SQLite adapter.
    """

    def __init__(self, store: dict[str, str] | None = None, *, key: str = DEFAULT_KEY) -> None:
        self.store: dict[str, str] = store if store is not None else {}
        self.key = key

    def load(self) -> GraphState | None:
        return decode_state(self.store.get(self.key), source=f"memory:{self.key}")

    def save(self, state: GraphState) -> None:
        self.store[self.key] = encode_state(state)


class SqlitePersistence:
    """Key-value adapter over the ``kv_store`` table."""

    def __init__(self, engine: Engine, *, key: str = DEFAULT_KEY) -> None:
        self._engine = engine
        self.key = key

    def load(self) -> GraphState | None:
        try:
            with self._engine.connect() as conn:
                raw = conn.execute(
                    select(kv_store.c.value).where(kv_store.c.key == self.key)
                ).scalar_one_or_none()
        except SQLAlchemyError:
            logger.warning("Failed to read graph state key %r", self.key, exc_info=True)
            return None
        return decode_state(raw, source=f"sqlite:{self.key}")

    def save(self, state: GraphState) -> None:
        try:
            self._upsert(encode_state(state))
        except SQLAlchemyError:
            logger.warning("Failed to persist graph state key %r", self.key, exc_info=True)

    def _upsert(self, raw: str) -> None:
        now = datetime.now(UTC).isoformat()
        stmt = insert(kv_store).values(key=self.key, value=raw, updated=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[kv_store.c.key],
            set_={"value": stmt.excluded.value, "updated": stmt.excluded.updated},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
