"""Per-render state for walking a DiagnosticError tree.

Tracks the errors currently being rendered (the active path from the root)
and the depth guard that bounds the walk. An error that is reached again
while it is still on the path is a cycle: the renderer stops there instead
of expanding it once more.

Thread Safety:
    Each top-level render creates its own RenderContext; nothing is shared
    between renders.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagnostix.constants import MAX_DEPTH
from diagnostix.core.depth_guard import DepthGuard

if TYPE_CHECKING:
    from diagnostix.core.error import DiagnosticError

__all__ = ["RenderContext"]


@dataclass(slots=True)
class RenderContext:
    """Explicit context for one top-level render.

    Errors are compared by identity: DiagnosticError is mutable and two
    distinct errors with equal content are not a cycle.

    Attributes:
        max_depth: Maximum nesting depth (clamped by DepthGuard)
        stack: Errors on the active render path, root first
        _seen: id() of every error in stack, for O(1) membership checks
        _depth_guard: DepthGuard for nesting depth tracking (internal)
    """

    max_depth: int = MAX_DEPTH
    stack: list[DiagnosticError] = field(default_factory=list)
    _seen: set[int] = field(default_factory=set, repr=False)
    _depth_guard: DepthGuard = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the depth guard with the configured max depth."""
        self._depth_guard = DepthGuard(max_depth=self.max_depth)

    def push(self, err: DiagnosticError) -> None:
        """Push err onto the render path."""
        self.stack.append(err)
        self._seen.add(id(err))

    def pop(self) -> DiagnosticError:
        """Pop the innermost error from the render path."""
        err = self.stack.pop()
        self._seen.discard(id(err))
        return err

    def contains(self, err: DiagnosticError) -> bool:
        """Check if err is already on the render path (cycle detection)."""
        return id(err) in self._seen

    def get_cycle_path(self, err: DiagnosticError) -> list[str]:
        """Messages from the root down to err, for log output."""
        return [item.message for item in (*self.stack, err)]

    @property
    def guard(self) -> DepthGuard:
        """Depth guard for context manager use."""
        return self._depth_guard

    @property
    def depth(self) -> int:
        """Current render path length."""
        return len(self.stack)
