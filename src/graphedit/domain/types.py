"""Graph entities and the persisted document layout.

Models mirror the on-disk JSON shape exactly, so
``GraphState.model_dump(mode="json")`` is what the persistence layer
writes and ``GraphState.model_validate_json`` is what it reads back.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_NODE_TYPE = "default"

# Cost of an edge without an explicit weight.
DEFAULT_EDGE_WEIGHT = 1.0


class Position(BaseModel):
    """Canvas coordinate. Opaque to the core."""

    model_config = {"frozen": True}

    x: float
    y: float


class NodeData(BaseModel):
    model_config = {"frozen": True}

    label: str


class Node(BaseModel):
    """A labeled, positioned vertex."""

    model_config = {"frozen": True}

    id: str
    type: str = DEFAULT_NODE_TYPE
    position: Position
    data: NodeData

    @property
    def label(self) -> str:
        return self.data.label


class EdgeData(BaseModel):
    model_config = {"frozen": True}

    weight: float | None = None


class Edge(BaseModel):
    """A connection between two nodes, optionally weighted.

    ``source`` and ``target`` are stored as drawn, but traversal treats
    the edge as undirected.
    """

    model_config = {"frozen": True}

    id: str
    source: str
    target: str
    data: EdgeData = Field(default_factory=EdgeData)
    label: str | None = None

    @property
    def weight(self) -> float | None:
        return self.data.weight

    @property
    def cost(self) -> float:
        """Weight used for path-finding (absent weight counts as 1)."""
        return DEFAULT_EDGE_WEIGHT if self.data.weight is None else self.data.weight

    def touches(self, node_ids: set[str] | frozenset[str]) -> bool:
        """True if either endpoint is in *node_ids*."""
        return self.source in node_ids or self.target in node_ids


class GraphState(BaseModel):
    """Snapshot of the full node and edge collections."""

    model_config = {"frozen": True}

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)


class ShortestPath(BaseModel):
    """Result of a shortest-path query: ordered node ids plus total weight."""

    model_config = {"frozen": True}

    path: list[str]
    distance: float


def seed_state() -> GraphState:
    """The default two-node graph used when nothing has been saved yet."""
    return GraphState(
        nodes=[
            Node(id="1", position=Position(x=100, y=100), data=NodeData(label="Node 1")),
            Node(id="2", position=Position(x=400, y=200), data=NodeData(label="Node 2")),
        ],
        edges=[],
    )


def format_weight(weight: float | None) -> str | None:
    """Render a weight as an edge display label.

    Integral weights drop the trailing ``.0`` (``2.0`` -> ``"2"``).
    """
    if weight is None:
        return None
    if weight.is_integer():
        return str(int(weight))
    return str(weight)
