"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from gointernal.services.result import ServiceResult
from gointernal.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
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

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_with_children_and_annotations(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.annotate("files", 3)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0] == {
            "name": "child",
            "duration_ms": d["children"][0]["duration_ms"],
            "annotations": {"files": 3},
        }


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class _Svc:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("step") as span:
            if span:
                span.annotate("n", 1)
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
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Svc.run"
        assert tree["children"][0]["name"] == "step"
        assert tree["children"][0]["annotations"] == {"n": 1}

    def test_non_result_return_passes_through(self) -> None:
        enable_telemetry()
        assert _Svc().plain() == 7

    def test_current_span_reset_after_call(self) -> None:
        enable_telemetry()
        _Svc().run()
        assert get_current_span() is None
