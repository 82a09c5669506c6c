"""Node ID generation.

Node IDs are decimal-integer strings assigned by the model. A new ID is
one more than the largest numeric ID present. IDs that do not parse as
integers (e.g. written by another tool) count as 0.

INVARIANT: IDs are never reused while a higher ID exists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graphedit.domain.types import Node


def numeric_id(node_id: str) -> int:
    """Integer value of *node_id*, or 0 if it is not a plain ASCII decimal integer.

    Signs, whitespace, underscores and non-ASCII digits all count as 0.
    """
    if node_id.isascii() and node_id.isdecimal():
        return int(node_id)
    return 0


def next_node_id(nodes: Iterable[Node]) -> str:
    """Return the ID for the next node appended to *nodes*.

    Examples:
        ``["1", "2"]`` -> ``"3"``; ``[]`` -> ``"1"``; ``["a", "7"]`` -> ``"8"``.
    """
    highest = max((numeric_id(node.id) for node in nodes), default=0)
    return str(max(highest, 0) + 1)
