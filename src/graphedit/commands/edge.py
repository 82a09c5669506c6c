"""Command group: edge connection, weighting, and deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphedit.commands._base import GraphGroup

if TYPE_CHECKING:
    from graphedit.commands._context import AppContext

_EDGE_EXAMPLES = """\
  graphedit edge connect 1 2 --weight 4.5
  graphedit edge weight edge-1-2 3
  graphedit edge weight edge-1-2
  graphedit edge delete edge-1-2"""


@click.group(cls=GraphGroup, examples=_EDGE_EXAMPLES)
def edge() -> None:
    """Connect nodes and manage edge weights."""


@edge.command(
    examples="""\
  graphedit edge connect 1 2
  graphedit edge connect 1 2 --weight 4.5"""
)
@click.argument("source")
@click.argument("target")
@click.option("--weight", type=float, default=None, help="Edge weight (default: unweighted).")
@click.pass_obj
def connect(app: AppContext, source: str, target: str, weight: float | None) -> None:
    """Connect SOURCE to TARGET."""
    app.emit(app.service.connect(source, target, weight=weight))


@edge.command(
    examples="""\
  graphedit edge weight edge-1-2 3
  graphedit edge weight edge-1-2        # clear the weight"""
)
@click.argument("edge_id")
@click.argument("weight", type=float, required=False, default=None)
@click.pass_obj
def weight(app: AppContext, edge_id: str, weight: float | None) -> None:
    """Set EDGE_ID's weight, or clear it when WEIGHT is omitted."""
    app.emit(app.service.set_edge_weight(edge_id, weight))


@edge.command(
    examples="""\
  graphedit edge delete edge-1-2
  graphedit edge delete edge-1-2 edge-2-3"""
)
@click.argument("edge_ids", nargs=-1, required=True)
@click.pass_obj
def delete(app: AppContext, edge_ids: tuple[str, ...]) -> None:
    """Delete edges by ID."""
    app.emit(app.service.delete_edges(list(edge_ids)))
