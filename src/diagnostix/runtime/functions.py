"""Built-in formatter functions for render fragments.

Fragments call formatters by name (``{{ bold_red("error") }}``). A registry
exposes its formatter table to Jinja2 as template globals, so users can add
their own with add_function() and call them from custom fragments.

Built-ins:
    bold, bold_red, bold_blue, bold_green: decoration spans
    split: str.split with an explicit separator (keeps empty trailing parts,
        unlike str.splitlines)

Python 3.13+.
"""

from collections.abc import Callable
from typing import TypeAlias

from diagnostix.decoration import bold, bold_blue, bold_green, bold_red

__all__ = ["Formatter", "create_default_functions", "split"]

Formatter: TypeAlias = Callable[..., object]

FUNC_BOLD = "bold"
FUNC_BOLD_RED = "bold_red"
FUNC_BOLD_BLUE = "bold_blue"
FUNC_BOLD_GREEN = "bold_green"
FUNC_SPLIT = "split"


def split(text: object, separator: str) -> list[str]:
    """Split text on separator.

    Examples:
        >>> split("a\\nb\\n", "\\n")
        ['a', 'b', '']
    """
    return str(text).split(separator)


def create_default_functions() -> dict[str, Formatter]:
    """Create a fresh formatter table with the built-in functions.

    Returns:
        New dict; callers may mutate it freely.
    """
    return {
        FUNC_BOLD: bold,
        FUNC_BOLD_RED: bold_red,
        FUNC_BOLD_BLUE: bold_blue,
        FUNC_BOLD_GREEN: bold_green,
        FUNC_SPLIT: split,
    }
