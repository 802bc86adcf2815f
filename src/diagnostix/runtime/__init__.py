"""Rendering runtime.

Provides the configuration registry (fragments + formatter functions),
the process-wide default registry, and the rendering engine.
Depends on the core package for the error model.

Python 3.13+.
"""

from .functions import create_default_functions
from .registry import (
    Registry,
    add_function,
    add_functions,
    create_registry,
    get_default_registry,
    reset,
    set_cause_fragment,
    set_fragment,
    set_helps_fragment,
    set_message_prefix_fragment,
    set_notes_fragment,
)
from .render_context import RenderContext
from .renderer import render_error

__all__ = [
    "Registry",
    "RenderContext",
    "add_function",
    "add_functions",
    "create_default_functions",
    "create_registry",
    "get_default_registry",
    "render_error",
    "reset",
    "set_cause_fragment",
    "set_fragment",
    "set_helps_fragment",
    "set_message_prefix_fragment",
    "set_notes_fragment",
]
