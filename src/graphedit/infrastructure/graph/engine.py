"""GraphEngine — lazy-built NetworkX graph over the model's snapshot.

Built on first access and discarded by :meth:`GraphEngine.invalidate`
whenever the model replaces a collection, so queries always see the
current state. Edges are loaded into an undirected ``MultiGraph``:
traversal ignores direction and parallel edges are kept individually.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphedit.domain.types import GraphState

type _Graph = nx.MultiGraph


def edge_cost(_u: str, _v: str, parallel: dict[Any, dict[str, Any]]) -> float:
    """Dijkstra weight function: cheapest of the parallel edges between u and v."""
    return min(attrs["cost"] for attrs in parallel.values())


class GraphEngine:
    """Lazy-loading graph engine backed by a state supplier."""

    def __init__(self, source: Callable[[], GraphState]) -> None:
        self._source = source
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it from the current state on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached graph, forcing a rebuild on next access."""
        self._graph = None

    def _build(self) -> _Graph:
        """Build a MultiGraph: every node first, then edges keyed by edge id.

        Edges whose endpoints are not in the node set are left out rather
        than letting NetworkX create placeholder nodes for them.
        """
        state = self._source()
        g: _Graph = nx.MultiGraph()
        for node in state.nodes:
            g.add_node(node.id, label=node.label)
        for edge in state.edges:
            if edge.source not in g or edge.target not in g:
                continue
            g.add_edge(
                edge.source,
                edge.target,
                key=edge.id,
                weight=edge.weight,
                cost=edge.cost,
            )
        return g
