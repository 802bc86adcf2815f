"""Tests for render depth limiting.

An error that wraps itself (or causes itself) must render a truncated
result instead of recursing until the interpreter gives up. Deep but
acyclic chains stop at the registry's max_depth.
"""

import logging
import sys

import pytest

from diagnostix import create_registry, new
from diagnostix.constants import MAX_DEPTH
from diagnostix.core import DepthGuard, RenderDepthExceededError
from diagnostix.core.depth_guard import depth_clamp
from diagnostix.runtime import RenderContext


class TestDepthGuard:
    """DepthGuard as a context manager."""

    def test_enter_exit(self) -> None:
        guard = DepthGuard(max_depth=2)
        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_exceeded(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard, pytest.raises(RenderDepthExceededError, match=r"\(1\)"):
            guard.__enter__()

    def test_failed_enter_does_not_leak_depth(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(RenderDepthExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exceeded_is_recursion_error(self) -> None:
        assert issubclass(RenderDepthExceededError, RecursionError)

    def test_default(self) -> None:
        assert DepthGuard().max_depth == depth_clamp(MAX_DEPTH)


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_small_depth_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    def test_huge_depth_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            clamped = depth_clamp(10**9)
        assert clamped < sys.getrecursionlimit()
        assert "Clamping" in caplog.text


class TestCyclicRender:
    """Self-referencing trees stop at the first repeated error."""

    def test_self_wrap(self) -> None:
        err = new("a")
        err.wrap(err)
        assert err.render() == "error: a\n\na"

    def test_self_cause(self) -> None:
        err = new("a")
        err.cause(err)
        assert err.render() == "error: a\n  --> a"

    def test_mutual_wrap(self) -> None:
        a = new("a")
        b = new("b")
        a.wrap(b)
        b.wrap(a)
        assert a.render() == "error: a\n\nerror: b\n\na"
        assert b.render() == "error: b\n\nerror: a\n\nb"

    def test_two_edge_self_wrap_finishes(self) -> None:
        err = new("a")
        err.wrap(err).wrap(err)
        assert err.render() == "error: a\n\na\n\na"

    def test_self_cause_and_wrap_finishes(self) -> None:
        err = new("a")
        err.cause(err).wrap(err)
        assert err.render() == "error: a\n  --> a\n\na"

    def test_wide_cycle_finishes(self) -> None:
        """Fan-out on a cycle costs one bare message per edge."""
        a = new("a")
        b = new("b")
        for _ in range(20):
            a.wrap(b)
            b.wrap(a)
        rendered = a.render()
        assert rendered.count("error: b") == 20
        assert rendered.count("error: a") == 1

    def test_cycle_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        err = new("loop")
        err.wrap(err)
        with caplog.at_level(logging.WARNING, logger="diagnostix.runtime.renderer"):
            rendered = err.render()
        assert rendered == "error: loop\n\nloop"
        assert "Cyclic error reference" in caplog.text
        assert "'loop' -> 'loop'" in caplog.text

    def test_shared_child_renders_each_time(self) -> None:
        """An error wrapped by two parents is not a cycle."""
        child = new("c").note("n")
        root = new("r").wrap(child).wrap(new("p").wrap(child))
        assert root.render() == (
            "error: r\n\nerror: c\n   = note: n\n\nerror: p\n\nerror: c\n   = note: n"
        )

    def test_render_is_repeatable(self) -> None:
        err = new("a")
        err.wrap(err)
        assert err.render() == err.render()


class TestDepthLimit:
    """Nesting deeper than the registry's max_depth is truncated."""

    def test_chain_truncated_at_limit(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = create_registry(max_depth=3)
        nodes = [registry.new_error(str(i)) for i in range(5)]
        for parent, child in zip(nodes, nodes[1:], strict=False):
            parent.wrap(child)
        with caplog.at_level(logging.WARNING):
            rendered = nodes[0].render()
        assert rendered == "error: 0\n\nerror: 1\n\nerror: 2\n\n3"
        assert "RenderDepthExceededError" in caplog.text

    def test_deep_chain_within_limit(self) -> None:
        root = new("0")
        node = root
        for i in range(1, 50):
            child = new(str(i))
            node.wrap(child)
            node = child
        rendered = root.render()
        assert rendered.count("error: ") == 50
        assert rendered.endswith("error: 49")


class TestRenderContext:
    """Render path bookkeeping."""

    def test_push_pop_contains(self) -> None:
        context = RenderContext()
        err = new("a")
        context.push(err)
        assert context.contains(err)
        assert not context.contains(new("a"))
        assert context.depth == 1
        assert context.pop() is err
        assert not context.contains(err)

    def test_cycle_path(self) -> None:
        context = RenderContext()
        a = new("a")
        context.push(a)
        context.push(new("b"))
        assert context.get_cycle_path(a) == ["a", "b", "a"]

    def test_guard_uses_max_depth(self) -> None:
        assert RenderContext(max_depth=7).guard.max_depth == 7
