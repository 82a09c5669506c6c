"""Node label rules.

Labels are trimmed on creation, must be non-empty, and must be unique
across all nodes (case-sensitive exact match).
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graphedit.domain.types import Node


class LabelError(StrEnum):
    """Validation failures for node creation. Values double as error codes."""

    EMPTY_LABEL = "EMPTY_LABEL"
    DUPLICATE_LABEL = "DUPLICATE_LABEL"


def normalize_label(label: str) -> str:
    return label.strip()


def check_label(label: str, nodes: Iterable[Node]) -> LabelError | None:
    """Validate an already-normalized *label* against existing *nodes*.

    Returns the first failing rule, or None when the label is acceptable.
    """
    if not label:
        return LabelError.EMPTY_LABEL
    if any(node.label == label for node in nodes):
        return LabelError.DUPLICATE_LABEL
    return None


def matches_query(label: str, query: str) -> bool:
    """Case-insensitive exact match used by label search."""
    return label.casefold() == query.casefold()
