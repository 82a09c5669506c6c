"""Collection builders run on behalf of the canvas.

A canvas computes the next node or edge collection itself (after a drag
or a new connection) and hands the whole snapshot to
``GraphModel.update_nodes`` / ``GraphModel.update_edges``. These helpers
are the headless equivalent of that step. They never mutate their input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphedit.domain.types import Edge, EdgeData, format_weight

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphedit.domain.types import Node, Position


def edge_id_for(source: str, target: str, taken: set[str] | None = None) -> str:
    """Build an edge ID, suffixing ``-2``, ``-3``... if the base is already *taken*."""
    base = f"edge-{source}-{target}"
    if not taken or base not in taken:
        return base
    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


def connection_exists(edges: Sequence[Edge], source: str, target: str) -> bool:
    return any(e.source == source and e.target == target for e in edges)


def connect(
    edges: Sequence[Edge],
    source: str,
    target: str,
    *,
    weight: float | None = None,
) -> list[Edge]:
    """Return *edges* plus a new ``source -> target`` edge.

    An identical connection (same source and target, in that order) is
    not added twice; the collection is returned unchanged instead.
    """
    result = list(edges)
    if connection_exists(result, source, target):
        return result
    result.append(
        Edge(
            id=edge_id_for(source, target, {e.id for e in result}),
            source=source,
            target=target,
            data=EdgeData(weight=weight),
            label=format_weight(weight),
        )
    )
    return result


def move_node(nodes: Sequence[Node], node_id: str, position: Position) -> list[Node]:
    """Return *nodes* with *node_id* relocated to *position*."""
    return [
        node.model_copy(update={"position": position}) if node.id == node_id else node
        for node in nodes
    ]
