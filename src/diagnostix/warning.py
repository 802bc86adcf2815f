"""Warning vocabulary: errors that render as ``warning`` instead of ``error``.

Built from the base defaults by overriding only the message-prefix
fragment and adding a bold_yellow formatter:

    warning[E0042]: deprecated option 'colour'
      --> config.toml:3

Use is_warning() to tell warnings apart from errors after the fact.

Python 3.13+.
"""

from __future__ import annotations

from diagnostix.core.error import DiagnosticError
from diagnostix.decoration import bold_yellow
from diagnostix.enums import FragmentName
from diagnostix.runtime.registry import Registry, create_registry

__all__ = ["from_error", "get_warning_registry", "is_warning", "new", "newf"]

WARNING_KEYWORD = "warning"

MESSAGE_PREFIX_FRAGMENT = """\
{%- if code -%}
{{ bold_yellow("warning[" ~ code ~ "]") }}
{%- else -%}
{{ bold_yellow("warning") }}
{%- endif -%}
"""

_WARNING_REGISTRY = create_registry(
    fragments={FragmentName.MESSAGE_PREFIX: MESSAGE_PREFIX_FRAGMENT},
    additional_functions={"bold_yellow": bold_yellow},
)


def get_warning_registry() -> Registry:
    """Return the frozen registry warnings render with."""
    return _WARNING_REGISTRY


def new(message: str) -> DiagnosticError:
    """Create a warning."""
    return _WARNING_REGISTRY.new_error(message)


def newf(format_string: str, *args: object) -> DiagnosticError:
    """Create a warning from a printf-style format."""
    return _WARNING_REGISTRY.new_errorf(format_string, *args)


def from_error(err: BaseException) -> DiagnosticError:
    """Turn any exception into a warning.

    A DiagnosticError is rebound in place (same object); anything else is
    upgraded to a fresh warning carrying the exception's text.
    """
    return _WARNING_REGISTRY.extend(err)


def is_warning(err: BaseException) -> bool:
    """Return True if err renders as a warning.

    Checks whether the first rendered line contains "warning". Only
    DiagnosticErrors can be warnings.
    """
    if not isinstance(err, DiagnosticError):
        return False
    first_line = err.render().split("\n", 1)[0]
    return WARNING_KEYWORD in first_line
