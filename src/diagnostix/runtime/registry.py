"""Configuration registry: render fragments and formatter functions.

A Registry bundles the Jinja2 fragments that render each part of a
diagnostic with the formatter functions those fragments call. Errors bound
to a registry render with it; unbound errors use the process default.

Two flavours:
    - Registries returned by create_registry() are FROZEN. Mutating them
      raises FrozenRegistryError; use copy() to get a mutable copy.
    - The process default registry is mutable through the module-level
      functions (set_cause_fragment, add_function, ...) and replaceable
      wholesale with reset().

Registries compose by partial override, not subclassing:

    >>> from diagnostix.decoration import bold_yellow
    >>> warnings = create_registry(
    ...     fragments={FragmentName.MESSAGE_PREFIX: '{{ bold_yellow("warning") }}'},
    ...     additional_functions={"bold_yellow": bold_yellow},
    ... )
    >>> str(warnings.new_error("disk almost full"))
    'warning: disk almost full'

Thread Safety:
    Each registry owns an RWLock. Rendering takes the read lock; fragment
    and function changes take the write lock. reset() swaps the default
    reference atomically, so errors rendering with the old default finish
    with it. Configure once at startup where possible.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from jinja2 import DictLoader, Environment, StrictUndefined

from diagnostix.constants import MAX_DEPTH, ROOT_TEMPLATE_NAME
from diagnostix.core.error import DiagnosticError, extend, new, newf
from diagnostix.core.errors import FrozenRegistryError
from diagnostix.enums import FragmentName

from .fragments import DEFAULT_FRAGMENTS, ROOT_TEMPLATE
from .functions import Formatter, create_default_functions
from .rwlock import RWLock

if TYPE_CHECKING:
    from jinja2 import Template

__all__ = [
    "Registry",
    "add_function",
    "add_functions",
    "create_registry",
    "get_default_registry",
    "reset",
    "set_cause_fragment",
    "set_fragment",
    "set_helps_fragment",
    "set_message_prefix_fragment",
    "set_notes_fragment",
]

logger = logging.getLogger(__name__)


def _build_environment(
    fragments: Mapping[str, str], functions: Mapping[str, Formatter]
) -> Environment:
    """Compile the render plan for a fragment/function set.

    Fragments are loaded lazily by Jinja2 on first include, so a malformed
    custom fragment surfaces as a TemplateSyntaxError at render time, where
    the renderer's fallback absorbs it.
    """
    loader = DictLoader({**fragments, ROOT_TEMPLATE_NAME: ROOT_TEMPLATE})
    environment = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=False,
        auto_reload=False,
    )
    environment.globals.update(functions)
    return environment


class Registry:
    """Fragments and formatter functions that control rendering.

    Attributes:
        fragments: Read-only view of fragment name -> template text
        functions: Read-only view of function name -> callable
        max_depth: Deepest wrapped/cause nesting rendered from one root
        frozen: Whether mutation is rejected
    """

    __slots__ = (
        "__weakref__",
        "_environment",
        "_fragments",
        "_frozen",
        "_functions",
        "_lock",
        "_max_depth",
    )

    def __init__(
        self,
        *,
        fragments: Mapping[str, str] | None = None,
        functions: Mapping[str, Formatter] | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize a mutable registry.

        Args:
            fragments: Fragment overrides merged over the built-in fragments
            functions: Complete formatter table (default: built-ins)
            max_depth: Render depth limit (must be positive)

        Raises:
            ValueError: If max_depth is not positive or a name is invalid
            TypeError: If a function is not callable
        """
        if max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)

        self._fragments: dict[str, str] = {
            str(name): text for name, text in DEFAULT_FRAGMENTS.items()
        }
        for name, text in (fragments or {}).items():
            self._fragments[_check_fragment_name(name)] = text

        if functions is None:
            self._functions: dict[str, Formatter] = create_default_functions()
        else:
            self._functions = {}
            for name, fn in functions.items():
                self._functions[_check_function_name(name)] = _check_callable(name, fn)

        self._max_depth = max_depth
        self._frozen = False
        self._lock = RWLock()
        self._environment = _build_environment(self._fragments, self._functions)

    # ------------------------------------------------------------------
    # Error construction
    # ------------------------------------------------------------------

    def new_error(self, message: str) -> DiagnosticError:
        """Create a DiagnosticError rendered with this registry."""
        return new(message).bind(self)

    def new_errorf(self, format_string: str, *args: object) -> DiagnosticError:
        """Create a printf-style formatted DiagnosticError bound to this registry."""
        return newf(format_string, *args).bind(self)

    def extend(self, err: BaseException) -> DiagnosticError:
        """Rebind err to this registry, upgrading foreign errors first.

        A DiagnosticError is rebound in place and returned (same object).
        """
        return extend(err).bind(self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_fragment(self, name: str, text: str) -> None:
        """Override (or add) a named fragment.

        Args:
            name: Fragment name (built-in FragmentName or a custom name
                that other fragments include)
            text: Jinja2 template source

        Raises:
            FrozenRegistryError: If the registry is frozen
            ValueError: If name is empty or reserved
        """
        with self._lock.write():
            self._check_mutable()
            name = _check_fragment_name(name)
            self._fragments[name] = text
            self._environment = _build_environment(self._fragments, self._functions)
        logger.debug("Set fragment: %s", name)

    def add_function(self, name: str, fn: Formatter) -> None:
        """Add (or replace) a formatter function callable from fragments.

        Raises:
            FrozenRegistryError: If the registry is frozen
            ValueError: If name is not a valid identifier
            TypeError: If fn is not callable
        """
        self.add_functions({name: fn})

    def add_functions(self, functions: Mapping[str, Formatter]) -> None:
        """Add (or replace) several formatter functions at once."""
        with self._lock.write():
            self._check_mutable()
            checked = {
                _check_function_name(name): _check_callable(name, fn)
                for name, fn in functions.items()
            }
            self._functions.update(checked)
            self._environment = _build_environment(self._fragments, self._functions)
        logger.debug("Added formatter functions: %s", ", ".join(checked))

    def freeze(self) -> Registry:
        """Reject all further mutation. Returns self."""
        with self._lock.write():
            self._frozen = True
        return self

    def copy(self) -> Registry:
        """Create an unfrozen copy with the same fragments and functions."""
        with self._lock.read():
            return Registry(
                fragments=self._fragments,
                functions=self._functions,
                max_depth=self._max_depth,
            )

    # ------------------------------------------------------------------
    # Introspection / rendering
    # ------------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def fragments(self) -> Mapping[str, str]:
        with self._lock.read():
            return MappingProxyType(dict(self._fragments))

    @property
    def functions(self) -> Mapping[str, Formatter]:
        with self._lock.read():
            return MappingProxyType(dict(self._functions))

    def render_block(self, data: Mapping[str, object]) -> str:
        """Render one error's own block (prefix, message, cause, notes, helps).

        Wrapped errors are not included; the renderer appends them.

        Raises:
            jinja2.TemplateError: If a fragment is malformed or references
                an unknown name
            Exception: Whatever a formatter function raises
        """
        with self._lock.read():
            template: Template = self._environment.get_template(ROOT_TEMPLATE_NAME)
            return template.render(data)

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = "Registry is frozen; use copy() to get a mutable registry"
            raise FrozenRegistryError(msg)

    def __repr__(self) -> str:
        return (
            f"Registry(fragments={len(self._fragments)}, "
            f"functions={len(self._functions)}, frozen={self._frozen})"
        )


def _check_fragment_name(name: object) -> str:
    if not isinstance(name, str) or not name:
        msg = "Fragment name must be a non-empty string"
        raise ValueError(msg)
    if name == ROOT_TEMPLATE_NAME:
        msg = f"Fragment name '{name}' is reserved"
        raise ValueError(msg)
    # FragmentName members are str subclasses; normalize to plain str keys
    return str(name)


def _check_function_name(name: object) -> str:
    if not isinstance(name, str) or not name.isidentifier():
        msg = f"Function name must be a valid identifier, got {name!r}"
        raise ValueError(msg)
    return name


def _check_callable(name: str, fn: object) -> Formatter:
    if not callable(fn):
        msg = f"Function '{name}' is not callable"
        raise TypeError(msg)
    return fn


def create_registry(
    *,
    functions: Mapping[str, Formatter] | None = None,
    additional_functions: Mapping[str, Formatter] | None = None,
    fragments: Mapping[str, str] | None = None,
    max_depth: int = MAX_DEPTH,
) -> Registry:
    """Build a frozen registry from the built-in defaults.

    Args:
        functions: Replace the whole formatter table
        additional_functions: Merge formatters into the table
        fragments: Override named fragments
        max_depth: Render depth limit

    Returns:
        Frozen Registry

    Example:
        >>> registry = create_registry(fragments={"cause": "{{ cause }}"})
        >>> registry.frozen
        True
    """
    registry = Registry(fragments=fragments, functions=functions, max_depth=max_depth)
    if additional_functions:
        registry.add_functions(additional_functions)
    return registry.freeze()


# ============================================================================
# PROCESS DEFAULT
# ============================================================================

_default_lock = threading.Lock()
_default_registry: Registry = Registry()


def get_default_registry() -> Registry:
    """Return the current process-wide default registry."""
    with _default_lock:
        return _default_registry


def reset() -> None:
    """Replace the default registry with a fresh one built from defaults.

    Discards every fragment override and added function. Intended mainly
    for test isolation.
    """
    global _default_registry  # noqa: PLW0603  # pylint: disable=global-statement
    with _default_lock:
        _default_registry = Registry()
    logger.debug("Default registry reset")


def set_fragment(name: str, text: str) -> None:
    """Override a named fragment of the default registry."""
    get_default_registry().set_fragment(name, text)


def set_message_prefix_fragment(text: str) -> None:
    """Override the default registry's message-prefix fragment."""
    set_fragment(FragmentName.MESSAGE_PREFIX, text)


def set_cause_fragment(text: str) -> None:
    """Override the default registry's cause fragment."""
    set_fragment(FragmentName.CAUSE, text)


def set_notes_fragment(text: str) -> None:
    """Override the default registry's notes fragment."""
    set_fragment(FragmentName.NOTES, text)


def set_helps_fragment(text: str) -> None:
    """Override the default registry's helps fragment."""
    set_fragment(FragmentName.HELPS, text)


def add_function(name: str, fn: Formatter) -> None:
    """Add a formatter function to the default registry."""
    get_default_registry().add_function(name, fn)


def add_functions(functions: Mapping[str, Formatter]) -> None:
    """Add several formatter functions to the default registry."""
    get_default_registry().add_functions(functions)
