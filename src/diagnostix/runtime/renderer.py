"""Rendering engine: turns a DiagnosticError tree into text.

Algorithm, per error:
    1. Render the error's own block with its registry (message prefix,
       message, cause, notes, helps). A DiagnosticError cause is rendered
       recursively first and handed to the cause fragment as text.
    2. Append each wrapped error after a blank line, in attachment order.
       DiagnosticErrors recurse (with their own registry); anything else
       renders via str().

Failure handling:
    Rendering never raises. If an error's block cannot be rendered (broken
    custom fragment, unknown name, formatter that raises, runaway nesting),
    the failure is logged at WARNING and the error renders as its bare
    message. Wrapped errors fail independently of their parent.

Cycles:
    An error reached again while it is still on the render path renders as
    its bare message and is not expanded. The same error wrapped twice by
    different parents (no cycle) renders in full both times.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from diagnostix.constants import (
    DATA_CAUSE,
    DATA_CODE,
    DATA_HELPS,
    DATA_MESSAGE,
    DATA_NOTES,
    DATA_WRAPPED,
)
from diagnostix.core.error import DiagnosticError

from .registry import get_default_registry
from .render_context import RenderContext

if TYPE_CHECKING:
    from .registry import Registry

__all__ = ["render_error", "resolve_registry"]

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR = "\n\n"


def resolve_registry(err: DiagnosticError) -> Registry:
    """Registry err renders with: its bound registry or the current default."""
    return err.registry or get_default_registry()


def render_error(err: BaseException, context: RenderContext | None = None) -> str:
    """Render err and everything it wraps.

    Args:
        err: Any exception; non-DiagnosticErrors render via str()
        context: Render path and depth guard shared across one top-level
            render (created from the root error's registry when omitted)

    Returns:
        Rendered text; never raises for DiagnosticError input
    """
    if not isinstance(err, DiagnosticError):
        return str(err)

    if context is None:
        context = RenderContext(max_depth=resolve_registry(err).max_depth)

    if context.contains(err):
        logger.warning(
            "Cyclic error reference, rendering %r as its message: %s",
            err.message,
            " -> ".join(repr(message) for message in context.get_cycle_path(err)),
        )
        return err.message

    context.push(err)
    try:
        with context.guard:
            return _render_tree(err, context)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # Custom fragments and formatter functions are arbitrary user code;
        # none of their failures may escape str(err).
        logger.warning(
            "Failed to render error %r, falling back to its message: %s: %s",
            err.message,
            type(exc).__name__,
            exc,
        )
        return err.message
    finally:
        context.pop()


def _render_tree(err: DiagnosticError, context: RenderContext) -> str:
    cause = err.root_cause
    data: dict[str, object] = {
        DATA_MESSAGE: err.message,
        DATA_CODE: err.error_code,
        DATA_CAUSE: None if cause is None else render_error(cause, context),
        DATA_NOTES: err.notes,
        DATA_HELPS: err.helps,
        DATA_WRAPPED: err.wrapped,
    }
    data.update(err.extra_data)

    parts = [resolve_registry(err).render_block(data)]
    for wrapped in err.wrapped:
        parts.append(_BLOCK_SEPARATOR)
        parts.append(render_error(wrapped, context))
    return "".join(parts)
