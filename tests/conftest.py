"""Shared pytest fixtures and test helpers for graphedit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from graphedit.config.settings import GraphSettings
from graphedit.domain.types import Position
from graphedit.infrastructure.database.engine import init_database
from graphedit.infrastructure.persistence import MemoryPersistence
from graphedit.infrastructure.workspace import Workspace
from graphedit.services.model import GraphModel
from graphedit.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_global_state() -> Iterator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg = logging.getLogger("graphedit")
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Workspace]:
    """Workspace rooted at a temp directory."""
    ws = Workspace(GraphSettings.from_cli(root=tmp_path))
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def memory() -> MemoryPersistence:
    return MemoryPersistence()


@pytest.fixture
def model(memory: MemoryPersistence) -> GraphModel:
    """Model started from the seed graph (nodes "1" and "2")."""
    return GraphModel(memory)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests with CWD at a temp workspace and no config override.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.delenv("GRAPHEDIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_node(model: GraphModel, label: str, x: float = 0, y: float = 0) -> str:
    """Add a node, asserting success, and return its ID."""
    result = model.add_node(label, Position(x=x, y=y))
    assert result.ok, result.error
    return result.data["id"]


def build_graph(
    model: GraphModel,
    labels: list[str],
    edges: list[tuple[str, str, float | None]],
) -> dict[str, str]:
    """Replace the model with *labels* and weighted *edges* (by label).

    Returns a map of label -> node ID.
    """
    from graphedit.domain import changes

    model.delete_nodes([n.id for n in model.nodes])
    ids = {label: add_node(model, label) for label in labels}
    current = list(model.edges)
    for source, target, weight in edges:
        current = changes.connect(current, ids[source], ids[target], weight=weight)
    model.update_edges(current)
    return ids
