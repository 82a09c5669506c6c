"""Standalone commands: show, search, path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphedit.commands._base import GraphCommand

if TYPE_CHECKING:
    from graphedit.commands._context import AppContext


@click.command(
    cls=GraphCommand,
    examples="""\
  graphedit show
  graphedit --json show
  graphedit -q show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """List all nodes and edges."""
    app.emit(app.service.show())


@click.command(
    cls=GraphCommand,
    examples="""\
  graphedit search "node 1"
  graphedit --json search Depot""",
)
@click.argument("query")
@click.pass_obj
def search(app: AppContext, query: str) -> None:
    """Find the node whose label matches QUERY (case-insensitive)."""
    app.emit(app.service.search(query))


@click.command(
    cls=GraphCommand,
    examples="""\
  graphedit path 1 4
  graphedit --json path 1 4""",
)
@click.argument("start_id")
@click.argument("end_id")
@click.pass_obj
def path(app: AppContext, start_id: str, end_id: str) -> None:
    """Find the shortest weighted path from START_ID to END_ID."""
    app.emit(app.service.path(start_id, end_id))
