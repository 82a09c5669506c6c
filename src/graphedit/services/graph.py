"""GraphService — interface-facing operations over a GraphModel.

Wraps the model's operations in ServiceResult for the CLI. Caller-side
validation lives here: weights must be finite and non-negative, and
targeted operations on unknown nodes report ``NOT_FOUND``. The model
itself stays lenient where it is documented to be.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from graphedit.domain import changes
from graphedit.domain.types import Position
from graphedit.services.result import ServiceResult
from graphedit.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphedit.domain.types import Edge, Node
    from graphedit.services.model import GraphModel


def _node_item(node: Node) -> dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "type": node.type,
        "x": node.position.x,
        "y": node.position.y,
    }


def _edge_item(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "weight": edge.weight,
    }


def _invalid_weight(op: str, weight: float | None) -> ServiceResult | None:
    """Reject negative or non-finite weights before they reach the model."""
    if weight is None or (math.isfinite(weight) and weight >= 0):
        return None
    return ServiceResult.failure(
        op,
        "INVALID_WEIGHT",
        f"Edge weight must be a non-negative number, got {weight}",
        weight=weight,
    )


class GraphService:
    """Editing, search, and path queries for one model instance."""

    def __init__(self, model: GraphModel) -> None:
        self._model = model

    def _missing_nodes(self, op: str, node_ids: Sequence[str]) -> ServiceResult | None:
        for node_id in node_ids:
            if self._model.get_node(node_id) is None:
                return ServiceResult.failure(
                    op, "NOT_FOUND", f"Node '{node_id}' not found", id=node_id
                )
        return None

    # ------------------------------------------------------------------
    # show
    # ------------------------------------------------------------------

    @traced
    def show(self) -> ServiceResult:
        """Current node and edge collections."""
        nodes = [_node_item(n) for n in self._model.nodes]
        edges = [_edge_item(e) for e in self._model.edges]
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "node_count": len(nodes),
                "edge_count": len(edges),
                "nodes": nodes,
                "edges": edges,
            },
        )

    # ------------------------------------------------------------------
    # nodes
    # ------------------------------------------------------------------

    @traced
    def add_node(self, label: str, x: float, y: float) -> ServiceResult:
        return self._model.add_node(label, Position(x=x, y=y))

    @traced
    def move_node(self, node_id: str, x: float, y: float) -> ServiceResult:
        """Relocate a node (the headless equivalent of a canvas drag)."""
        op = "move_node"
        if missing := self._missing_nodes(op, [node_id]):
            return missing

        position = Position(x=x, y=y)
        self._model.update_nodes(changes.move_node(self._model.nodes, node_id, position))
        return ServiceResult(ok=True, op=op, data={"id": node_id, "x": x, "y": y})

    @traced
    def delete_nodes(self, node_ids: Sequence[str]) -> ServiceResult:
        """Delete nodes and, by cascade, every edge attached to them."""
        op = "delete_nodes"
        unknown = [nid for nid in node_ids if self._model.get_node(nid) is None]
        nodes_before = len(self._model.nodes)
        edges_before = len(self._model.edges)

        self._model.delete_nodes(node_ids)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "nodes_removed": nodes_before - len(self._model.nodes),
                "edges_removed": edges_before - len(self._model.edges),
            },
            warnings=[f"Node '{nid}' not found" for nid in unknown],
        )

    # ------------------------------------------------------------------
    # edges
    # ------------------------------------------------------------------

    @traced
    def connect(self, source: str, target: str, *, weight: float | None = None) -> ServiceResult:
        """Draw an edge between two existing nodes."""
        op = "connect"
        if invalid := _invalid_weight(op, weight):
            return invalid
        if missing := self._missing_nodes(op, [source, target]):
            return missing

        current = self._model.edges
        if changes.connection_exists(current, source, target):
            existing = next(e for e in current if e.source == source and e.target == target)
            return ServiceResult(
                ok=True,
                op=op,
                data=_edge_item(existing),
                warnings=[f"Connection {source} -> {target} already exists"],
            )

        updated = changes.connect(current, source, target, weight=weight)
        self._model.update_edges(updated)
        return ServiceResult(ok=True, op=op, data=_edge_item(updated[-1]))

    @traced
    def set_edge_weight(self, edge_id: str, weight: float | None) -> ServiceResult:
        """Set or clear an edge weight. An unknown edge changes nothing."""
        op = "set_edge_weight"
        if invalid := _invalid_weight(op, weight):
            return invalid

        updated = self._model.update_edge_properties(edge_id, weight)
        warnings = [] if updated else [f"Edge '{edge_id}' not found; nothing changed"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": edge_id, "weight": weight, "updated": updated},
            warnings=warnings,
        )

    @traced
    def delete_edges(self, edge_ids: Sequence[str]) -> ServiceResult:
        op = "delete_edges"
        unknown = [eid for eid in edge_ids if self._model.get_edge(eid) is None]
        before = len(self._model.edges)
        self._model.delete_edges(edge_ids)
        return ServiceResult(
            ok=True,
            op=op,
            data={"edges_removed": before - len(self._model.edges)},
            warnings=[f"Edge '{eid}' not found" for eid in unknown],
        )

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------

    @traced
    def search(self, query: str) -> ServiceResult:
        """Find a node by label (case-insensitive exact match)."""
        op = "search"
        highlighted = self._model.set_search_query(query)
        if not query.strip():
            return ServiceResult(ok=True, op=op, data={"query": query, "match": None})
        node = self._model.get_node(highlighted) if highlighted is not None else None
        if node is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"Node not found: {query.strip()}", query=query
            )
        return ServiceResult(ok=True, op=op, data={"query": query, "match": _node_item(node)})

    # ------------------------------------------------------------------
    # path
    # ------------------------------------------------------------------

    @traced
    def path(self, start_id: str, end_id: str) -> ServiceResult:
        """Shortest weighted path between two nodes.

        "No path" is reported as a ``NO_PATH`` error so it can't be
        mistaken for a zero-distance path.
        """
        op = "path"
        if missing := self._missing_nodes(op, [start_id, end_id]):
            return missing

        with trace_span("dijkstra") as span:
            found = self._model.find_shortest_path(start_id, end_id)
            if span:
                span.annotate("nodes", len(self._model.nodes))
                span.annotate("edges", len(self._model.edges))

        if found is None:
            return ServiceResult.failure(
                op,
                "NO_PATH",
                f"No path between '{start_id}' and '{end_id}'",
                start_id=start_id,
                end_id=end_id,
            )

        steps: list[dict[str, Any]] = []
        for node_id in found.path:
            node = self._model.get_node(node_id)
            steps.append({"id": node_id, "label": node.label if node else ""})

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start_id": start_id,
                "end_id": end_id,
                "distance": found.distance,
                "length": len(found.path) - 1,
                "steps": steps,
            },
        )
