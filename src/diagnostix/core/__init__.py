"""Core error model shared by the runtime and public API.

Provides DiagnosticError (the composable error), the library's own
exception hierarchy, and the render depth guard.

Python 3.13+.
"""

from .depth_guard import DepthGuard
from .error import DiagnosticError, extend, extend_with_message, new, newf
from .errors import (
    DiagnostixError,
    FrozenRegistryError,
    InvalidCodeError,
    RenderDepthExceededError,
)

__all__ = [
    "DepthGuard",
    "DiagnosticError",
    "DiagnostixError",
    "FrozenRegistryError",
    "InvalidCodeError",
    "RenderDepthExceededError",
    "extend",
    "extend_with_message",
    "new",
    "newf",
]
