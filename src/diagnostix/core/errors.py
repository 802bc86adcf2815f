"""Library exception hierarchy.

These are the errors diagnostix itself raises for programming mistakes.
They are distinct from DiagnosticError, which is the user-facing error
object the library builds and renders.

Python 3.13+.
"""

from diagnostix.constants import MAX_CODE, MIN_CODE

__all__ = [
    "DiagnostixError",
    "FrozenRegistryError",
    "InvalidCodeError",
    "RenderDepthExceededError",
]


class DiagnostixError(Exception):
    """Base exception for all diagnostix programming errors."""


class InvalidCodeError(DiagnostixError, ValueError):
    """Numeric error code outside the supported range.

    Codes are rendered as a fixed four digit tag (E0000-E9999), so anything
    outside that range is a bug at the call site, not a runtime condition.

    Attributes:
        code: The rejected value
    """

    def __init__(self, code: int) -> None:
        """Initialize InvalidCodeError.

        Args:
            code: The rejected value
        """
        super().__init__(f"number out of range: {code} (expected {MIN_CODE}-{MAX_CODE})")
        self.code = code


class FrozenRegistryError(DiagnostixError, TypeError):
    """Mutation attempted on a frozen Registry.

    Registries returned by create_registry() are frozen. Use copy() to get a
    mutable copy, or mutate the process default registry instead.
    """


class RenderDepthExceededError(DiagnostixError, RecursionError):
    """Wrapped/cause chain nested deeper than the configured limit.

    Usually means an error wraps itself, directly or through a cycle.
    The renderer absorbs this error and falls back to the bare message.
    """

    def __init__(self, max_depth: int) -> None:
        """Initialize RenderDepthExceededError.

        Args:
            max_depth: The limit that was hit
        """
        super().__init__(f"Maximum render depth ({max_depth}) exceeded")
        self.max_depth = max_depth
