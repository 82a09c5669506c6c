"""Tests for node label rules."""

from __future__ import annotations

from graphedit.domain.labels import LabelError, check_label, matches_query, normalize_label
from graphedit.domain.types import Node, NodeData, Position


def _nodes(*labels: str) -> list[Node]:
    return [
        Node(id=str(i), position=Position(x=0, y=0), data=NodeData(label=label))
        for i, label in enumerate(labels, start=1)
    ]


class TestNormalizeLabel:
    def test_strips_whitespace(self) -> None:
        assert normalize_label("  Depot \t") == "Depot"


class TestCheckLabel:
    def test_accepts_new_label(self) -> None:
        assert check_label("C", _nodes("A", "B")) is None

    def test_empty(self) -> None:
        assert check_label("", _nodes()) is LabelError.EMPTY_LABEL

    def test_duplicate(self) -> None:
        assert check_label("A", _nodes("A")) is LabelError.DUPLICATE_LABEL

    def test_duplicate_is_case_sensitive(self) -> None:
        assert check_label("a", _nodes("A")) is None

    def test_error_values_are_codes(self) -> None:
        assert LabelError.EMPTY_LABEL == "EMPTY_LABEL"
        assert LabelError.DUPLICATE_LABEL == "DUPLICATE_LABEL"


class TestMatchesQuery:
    def test_case_insensitive(self) -> None:
        assert matches_query("Node 1", "node 1")
        assert matches_query("node 1", "NODE 1")

    def test_exact_not_substring(self) -> None:
        assert not matches_query("Node 10", "Node 1")
