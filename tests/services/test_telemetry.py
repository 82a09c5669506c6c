"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from graphedit.services.graph import GraphService
from graphedit.services.model import GraphModel
from graphedit.services.result import ServiceResult
from graphedit.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="child")
        child.annotate("rows", 3)
        root.children.append(child)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"rows": 3}


class TestTraceSpan:
    def test_yields_none_when_disabled(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_yields_none_outside_traced_call(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class _Svc:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("inner") as span:
            if span:
                span.annotate("k", "v")
        return ServiceResult(ok=True, op="run")

    @traced
    def plain(self) -> int:
        return 7


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        assert _Svc().run().meta is None

    def test_enabled_attaches_span_tree(self) -> None:
        enable_telemetry()
        result = _Svc().run()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Svc.run"
        assert tree["children"][0] == {
            "name": "inner",
            "duration_ms": tree["children"][0]["duration_ms"],
            "annotations": {"k": "v"},
        }

    def test_non_result_return_untouched(self) -> None:
        enable_telemetry()
        assert _Svc().plain() == 7

    def test_span_reset_after_call(self) -> None:
        enable_telemetry()
        _Svc().run()
        assert _current_span.get() is None

    def test_service_path_has_dijkstra_span(self, model: GraphModel) -> None:
        enable_telemetry()
        result = GraphService(model).path("1", "1")
        assert result.meta is not None
        children = result.meta["telemetry"]["children"]
        assert children[0]["name"] == "dijkstra"
        assert children[0]["annotations"] == {"nodes": 2, "edges": 0}
