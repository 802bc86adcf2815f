"""Depth limiting for recursive rendering.

Rendering walks wrapped errors and DiagnosticError causes recursively.
A DepthGuard bounds that walk so a very deep chain degrades to a truncated
render instead of a RecursionError.

Thread-safe: uses explicit state, no thread-local storage. Each top-level
render creates its own guard.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from diagnostix.constants import MAX_DEPTH

from .errors import RenderDepthExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Approximate interpreter frames consumed per nested render level.
_FRAMES_PER_LEVEL = 8


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting render depth.

    Usage:
        guard = DepthGuard()
        with guard:
            text = render_child(child)

    Mutability Note:
        Intentionally mutable (not frozen=True): current_depth is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        The limit is checked BEFORE incrementing: __exit__ does not run when
        __enter__ raises, so incrementing first would leave the guard
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise RenderDepthExceededError(self.max_depth)
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Every rendered level costs several interpreter frames (renderer, Jinja2
    template, include), so the limit is divided accordingly before the
    reserve is subtracted.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested render depth %d exceeds what the Python recursion limit (%d) allows. "
            "Clamping to %d.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
