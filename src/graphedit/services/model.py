"""GraphModel — canonical node/edge state and its mutation operations.

The model owns the node and edge collections, enforces the graph
invariants on every mutation, persists through an injected adapter, and
notifies subscribers. It is created once by the entry point and passed
to whatever needs it; there is no module-level instance.

INVARIANTS (after every mutation):
- Node labels are unique (case-sensitive) — enforced by :meth:`add_node`.
- A new node's ID is one more than the highest numeric ID present.
- No edge references a missing node — :meth:`delete_nodes` cascades.

Wholesale replacement via :meth:`update_nodes` / :meth:`update_edges`
trusts the caller and does not re-validate labels.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import networkx as nx

from graphedit.domain.ids import next_node_id
from graphedit.domain.labels import LabelError, check_label, matches_query, normalize_label
from graphedit.domain.types import (
    DEFAULT_NODE_TYPE,
    EdgeData,
    GraphState,
    Node,
    NodeData,
    ShortestPath,
    format_weight,
    seed_state,
)
from graphedit.infrastructure.graph.engine import GraphEngine, edge_cost
from graphedit.services.result import ServiceResult

if TYPE_CHECKING:
    from graphedit.domain.types import Edge, Position
    from graphedit.infrastructure.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphChange:
    """Notification sent to subscribers after a change is applied."""

    op: str
    state: GraphState


Subscriber = Callable[[GraphChange], None]


class GraphModel:
    """In-memory graph state manager.

    Usage::

        model = GraphModel(SqlitePersistence(engine))
        unsubscribe = model.subscribe(lambda change: redraw(change.state))
        result = model.add_node("Depot", Position(x=10, y=20))
        if not result.ok:
            prompt_again(result.error.message)
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        *,
        node_type: str = DEFAULT_NODE_TYPE,
    ) -> None:
        self._persistence = persistence
        self._node_type = node_type

        state = persistence.load()
        if state is None:
            logger.debug("No saved graph state, starting from seed graph")
            state = seed_state()

        self._nodes: tuple[Node, ...] = tuple(state.nodes)
        self._edges: tuple[Edge, ...] = tuple(state.edges)
        self._search_query = ""
        self._highlighted_node_id: str | None = None
        self._subscribers: list[Subscriber] = []
        self._graph = GraphEngine(lambda: self.state)

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def state(self) -> GraphState:
        return GraphState(nodes=list(self._nodes), edges=list(self._edges))

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def highlighted_node_id(self) -> str | None:
        return self._highlighted_node_id

    def get_node(self, node_id: str) -> Node | None:
        return next((n for n in self._nodes if n.id == node_id), None)

    def get_edge(self, edge_id: str) -> Edge | None:
        return next((e for e in self._edges if e.id == edge_id), None)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for change notifications.

        Returns a function that removes the registration.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, label: str, position: Position) -> ServiceResult:
        """Create a node with a unique, non-empty label.

        The label is trimmed first. Validation failures come back as a
        failed ServiceResult (``EMPTY_LABEL`` or ``DUPLICATE_LABEL``) and
        leave the model untouched.
        """
        op = "add_node"
        label = normalize_label(label)

        match check_label(label, self._nodes):
            case LabelError.EMPTY_LABEL:
                return ServiceResult.failure(
                    op, LabelError.EMPTY_LABEL.value, "Label cannot be empty"
                )
            case LabelError.DUPLICATE_LABEL:
                return ServiceResult.failure(
                    op,
                    LabelError.DUPLICATE_LABEL.value,
                    f'Label "{label}" already exists',
                    label=label,
                )

        node = Node(
            id=next_node_id(self._nodes),
            type=self._node_type,
            position=position,
            data=NodeData(label=label),
        )
        self._nodes = (*self._nodes, node)
        self._commit(op)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": node.id, "label": node.label, "position": node.position.model_dump()},
        )

    def update_nodes(self, nodes: Iterable[Node]) -> None:
        """Replace the node collection with a caller-computed snapshot."""
        self._nodes = tuple(nodes)
        self._commit("update_nodes")

    def update_edges(self, edges: Iterable[Edge]) -> None:
        """Replace the edge collection with a caller-computed snapshot."""
        self._edges = tuple(edges)
        self._commit("update_edges")

    def delete_nodes(self, node_ids: Iterable[str]) -> None:
        """Remove the given nodes and every edge touching any of them."""
        doomed = frozenset(node_ids)
        self._nodes = tuple(n for n in self._nodes if n.id not in doomed)
        self._edges = tuple(e for e in self._edges if not e.touches(doomed))
        self._commit("delete_nodes")

    def delete_edges(self, edge_ids: Iterable[str]) -> None:
        doomed = frozenset(edge_ids)
        self._edges = tuple(e for e in self._edges if e.id not in doomed)
        self._commit("delete_edges")

    def update_edge_properties(self, edge_id: str, weight: float | None = None) -> bool:
        """Set an edge's weight and its mirrored display label.

        An unknown *edge_id* is a silent no-op: nothing is persisted and
        False is returned.
        """
        for index, edge in enumerate(self._edges):
            if edge.id == edge_id:
                break
        else:
            logger.debug("update_edge_properties: no edge %s", edge_id)
            return False

        updated = edge.model_copy(
            update={"data": EdgeData(weight=weight), "label": format_weight(weight)}
        )
        self._edges = (*self._edges[:index], updated, *self._edges[index + 1 :])
        self._commit("update_edge_properties")
        return True

    # ------------------------------------------------------------------
    # Search (transient, never persisted)
    # ------------------------------------------------------------------

    def set_search_query(self, query: str) -> str | None:
        """Highlight the first node whose label equals *query*, ignoring case.

        A blank query clears the highlight. Returns the highlighted node id.
        """
        self._search_query = query
        needle = query.strip()
        if not needle:
            self._highlighted_node_id = None
        else:
            match = next((n for n in self._nodes if matches_query(n.label, needle)), None)
            self._highlighted_node_id = match.id if match else None
        self._notify("set_search_query")
        return self._highlighted_node_id

    def clear_search(self) -> None:
        self.set_search_query("")

    # ------------------------------------------------------------------
    # Shortest path
    # ------------------------------------------------------------------

    def find_shortest_path(self, start_id: str, end_id: str) -> ShortestPath | None:
        """Minimum-weight path between two nodes, treating edges as undirected.

        Edges without a weight cost 1; among parallel edges the cheapest
        one counts. Returns None when either node is missing or *end_id*
        is unreachable. Weights are assumed non-negative.
        """
        g = self._graph.graph
        if start_id not in g or end_id not in g:
            return None
        try:
            distance, path = nx.single_source_dijkstra(g, start_id, end_id, weight=edge_cost)
        except nx.NetworkXNoPath:
            return None
        return ShortestPath(path=list(path), distance=float(distance))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _commit(self, op: str) -> None:
        """Persist the current snapshot, then notify subscribers.

        A failing adapter never rolls back the in-memory change.
        """
        self._graph.invalidate()
        try:
            self._persistence.save(self.state)
        except Exception:
            logger.warning("Persisting graph state failed after %s", op, exc_info=True)
        self._notify(op)

    def _notify(self, op: str) -> None:
        if not self._subscribers:
            return
        change = GraphChange(op=op, state=self.state)
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                logger.warning("Subscriber failed on %s", op, exc_info=True)
