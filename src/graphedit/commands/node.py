"""Command group: node creation, movement, and deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphedit.commands._base import GraphGroup

if TYPE_CHECKING:
    from graphedit.commands._context import AppContext

_NODE_EXAMPLES = """\
  graphedit node add "Warehouse" --x 120 --y 80
  graphedit node move 3 300 40
  graphedit node delete 2 3"""


@click.group(cls=GraphGroup, examples=_NODE_EXAMPLES)
def node() -> None:
    """Create, move, and delete nodes."""


@node.command(
    examples="""\
  graphedit node add "Node 3"
  graphedit node add Depot --x 250 --y 125
  graphedit --json node add Depot"""
)
@click.argument("label")
@click.option("--x", "x", type=float, default=None, help="Horizontal position.")
@click.option("--y", "y", type=float, default=None, help="Vertical position.")
@click.pass_obj
def add(app: AppContext, label: str, x: float | None, y: float | None) -> None:
    """Create a node with a unique LABEL."""
    canvas = app.settings.canvas
    app.emit(
        app.service.add_node(
            label,
            canvas.default_x if x is None else x,
            canvas.default_y if y is None else y,
        )
    )


@node.command(
    examples="""\
  graphedit node move 3 300 40
  graphedit node move 3 -- -50 10"""
)
@click.argument("node_id")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.pass_obj
def move(app: AppContext, node_id: str, x: float, y: float) -> None:
    """Move NODE_ID to position (X, Y)."""
    app.emit(app.service.move_node(node_id, x, y))


@node.command(
    examples="""\
  graphedit node delete 2
  graphedit node delete 2 3 4"""
)
@click.argument("node_ids", nargs=-1, required=True)
@click.pass_obj
def delete(app: AppContext, node_ids: tuple[str, ...]) -> None:
    """Delete nodes and every edge attached to them."""
    app.emit(app.service.delete_nodes(list(node_ids)))
