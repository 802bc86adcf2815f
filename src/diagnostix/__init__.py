"""diagnostix - rich, compiler-style diagnostic errors.

Build errors with a message, an optional cause, notes, help hints, and
wrapped sibling errors, then render them Rust-compiler style:

    error[E0277]: 'Foo' is not an iterator
      --> src/main.rs:4:16
       = note: required by 'std::iter::IntoIterator::into_iter'
       = help: the trait 'std::iter::Iterator' is not implemented for 'Foo'

Public API:
    DiagnosticError - The composable error (chain methods return self)
    new, newf - Create an error
    extend, extend_with_message - Upgrade any exception to a DiagnosticError
    Registry, create_registry - Fragment/function sets controlling rendering
    reset, set_*_fragment, add_function(s) - Patch the process default registry
    suggest_values - Did-you-mean help text for invalid input values

Submodules:
    diagnostix.warning - Errors that render as "warning"
    diagnostix.decoration - ANSI styling and colour detection
    diagnostix.suggest - Levenshtein ranking
"""

from .core import (
    DiagnosticError,
    DiagnostixError,
    FrozenRegistryError,
    InvalidCodeError,
    extend,
    extend_with_message,
    new,
    newf,
)
from .enums import FragmentName, Style
from .runtime import (
    Registry,
    add_function,
    add_functions,
    create_registry,
    get_default_registry,
    render_error,
    reset,
    set_cause_fragment,
    set_fragment,
    set_helps_fragment,
    set_message_prefix_fragment,
    set_notes_fragment,
)
from .suggest import suggest_values

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("diagnostix")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DiagnosticError",
    "DiagnostixError",
    "FragmentName",
    "FrozenRegistryError",
    "InvalidCodeError",
    "Registry",
    "Style",
    "__version__",
    "add_function",
    "add_functions",
    "create_registry",
    "extend",
    "extend_with_message",
    "get_default_registry",
    "new",
    "newf",
    "render_error",
    "reset",
    "set_cause_fragment",
    "set_fragment",
    "set_helps_fragment",
    "set_message_prefix_fragment",
    "set_notes_fragment",
    "suggest_values",
]
