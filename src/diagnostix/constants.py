"""Shared constants for diagnostix.

Centralized configuration constants used by the core and runtime packages.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for wrapped/cause chains
- Error codes: Numeric tag range and formatting
- Render context: Names exposed to fragment templates

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Error codes
    "MIN_CODE",
    "MAX_CODE",
    "CODE_FORMAT",
    # Render context
    "DATA_MESSAGE",
    "DATA_CAUSE",
    "DATA_CODE",
    "DATA_NOTES",
    "DATA_HELPS",
    "DATA_WRAPPED",
    "ROOT_TEMPLATE_NAME",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of wrapped/cause errors rendered from a single root.
# Real error forests are a handful of levels deep; anything beyond 100 is a
# cycle (an error wrapping itself) or a runaway loop.
MAX_DEPTH: int = 100

# ============================================================================
# ERROR CODES
# ============================================================================

MIN_CODE: int = 0
MAX_CODE: int = 9999

# Rendered as error[E0123]
CODE_FORMAT: str = "E{code:04d}"

# ============================================================================
# RENDER CONTEXT
# ============================================================================

# Keys of the mapping passed to fragment templates.
DATA_MESSAGE: str = "message"
DATA_CAUSE: str = "cause"
DATA_CODE: str = "code"
DATA_NOTES: str = "notes"
DATA_HELPS: str = "helps"
DATA_WRAPPED: str = "wrapped"

# Name of the fixed template that stitches the fragments together.
ROOT_TEMPLATE_NAME: str = "__root__"
