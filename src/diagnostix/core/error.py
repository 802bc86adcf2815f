"""DiagnosticError: a composable, renderable error.

A DiagnosticError carries a message plus optional context and renders it
compiler-diagnostic style:

    error[E0277]: 'Foo' is not an iterator
      --> src/main.rs:4:16
       = note: required by 'std::iter::IntoIterator::into_iter'
       = help: the trait 'std::iter::Iterator' is not implemented for 'Foo'

    error: <wrapped error>

All mutators return the error itself, so errors are built by chaining:

    >>> err = (
    ...     new("failed to load config")
    ...     .code(42)
    ...     .cause(OSError("permission denied"))
    ...     .help("check the file permissions")
    ... )

Rendering is delegated to the registry the error is bound to (see
diagnostix.runtime.registry). Unbound errors use whatever the process-wide
default registry is at the moment they are rendered.

Python 3.13+.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from diagnostix.constants import CODE_FORMAT, MAX_CODE, MIN_CODE
from diagnostix.suggest import suggest_values

from .errors import InvalidCodeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagnostix.runtime.registry import Registry

__all__ = ["DiagnosticError", "extend", "extend_with_message", "new", "newf"]


def _format(format_string: str, args: tuple[object, ...]) -> str:
    # printf-style like logging; no args means the string is used verbatim
    return format_string % args if args else format_string


def _check_message(message: object) -> str:
    if not isinstance(message, str):
        msg = f"message must be str, got {type(message).__name__}"
        raise TypeError(msg)
    if not message:
        msg = "message must be a non-empty string"
        raise ValueError(msg)
    return message


def _check_error(err: object, role: str) -> BaseException:
    if not isinstance(err, BaseException):
        msg = f"{role} must be an exception, got {type(err).__name__}"
        raise TypeError(msg)
    return err


class DiagnosticError(Exception):
    """Error with a message, cause, code, notes, helps, and wrapped errors.

    Attributes are exposed read-only; use the chain methods to change them.

    Invariants:
        - message is a non-empty string
        - error_code, when set, is "E" followed by exactly four digits
        - notes, helps, and wrapped keep insertion order and duplicates
        - empty notes/helps are dropped on insertion
    """

    def __init__(self, message: str) -> None:
        """Initialize DiagnosticError.

        Args:
            message: Primary message (non-empty)

        Raises:
            TypeError: If message is not a string
            ValueError: If message is empty
        """
        message = _check_message(message)
        super().__init__(message)
        self._message = message
        self._cause: BaseException | None = None
        self._code: str | None = None
        self._notes: list[str] = []
        self._helps: list[str] = []
        self._wrapped: list[BaseException] = []
        self._extra_data: dict[str, Any] = {}
        self._registry_ref: weakref.ref[Registry] | None = None

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def bind(self, registry: Registry | None) -> DiagnosticError:
        """Render this error with registry (None: the process default)."""
        self._registry_ref = None if registry is None else weakref.ref(registry)
        return self

    def wrap(self, err: BaseException) -> DiagnosticError:
        """Attach a sibling error, rendered after this one."""
        self._wrapped.append(_check_error(err, "wrapped error"))
        return self

    def cause(self, err: BaseException | None) -> DiagnosticError:
        """Set the root cause (None clears it)."""
        self._cause = None if err is None else _check_error(err, "cause")
        return self

    def causef(self, format_string: str, *args: object) -> DiagnosticError:
        """Set the root cause to a plain exception holding formatted text."""
        return self.cause(Exception(_format(format_string, args)))

    def code(self, code: int) -> DiagnosticError:
        """Set the numeric error code, rendered as E0000-E9999.

        Raises:
            TypeError: If code is not an int
            InvalidCodeError: If code is outside 0-9999
        """
        if isinstance(code, bool) or not isinstance(code, int):
            msg = f"code must be int, got {type(code).__name__}"
            raise TypeError(msg)
        if not MIN_CODE <= code <= MAX_CODE:
            raise InvalidCodeError(code)
        self._code = CODE_FORMAT.format(code=code)
        return self

    def help(self, text: str) -> DiagnosticError:
        """Add a remediation hint; empty text is ignored."""
        if text:
            self._helps.append(text)
        return self

    def helpf(self, format_string: str, *args: object) -> DiagnosticError:
        """Add a printf-style formatted hint."""
        return self.help(_format(format_string, args))

    def help_if(self, text: str, condition: Callable[[], object]) -> DiagnosticError:
        """Add a hint only when condition() is truthy."""
        if condition():
            return self.help(text)
        return self

    def help_func(self, fn: Callable[[], str]) -> DiagnosticError:
        """Add the hint returned by fn(); an empty result is ignored."""
        return self.help(fn())

    def note(self, text: str) -> DiagnosticError:
        """Add an explanatory note; empty text is ignored."""
        if text:
            self._notes.append(text)
        return self

    def notef(self, format_string: str, *args: object) -> DiagnosticError:
        """Add a printf-style formatted note."""
        return self.note(_format(format_string, args))

    def set_extra_data(self, data: Mapping[str, Any]) -> DiagnosticError:
        """Merge extra names into the render context (last write wins).

        Extra names shadow the built-in context keys of the same name, so
        custom fragments can be fed arbitrary values.
        """
        self._extra_data.update(data)
        return self

    def suggest_value(self, value: str, available: Iterable[str]) -> DiagnosticError:
        """Add a did-you-mean hint for an invalid input value.

        Useful when the error occurs because of a wrong input value. An
        empty value lists every available value. See diagnostix.suggest.
        """
        suggestion = suggest_values(value, available)
        if suggestion is not None:
            self.help(suggestion)
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def message(self) -> str:
        """Primary message."""
        return self._message

    @property
    def root_cause(self) -> BaseException | None:
        """Cause set with cause()/causef()."""
        return self._cause

    @property
    def error_code(self) -> str | None:
        """Formatted code tag (e.g. "E0123") or None."""
        return self._code

    @property
    def notes(self) -> tuple[str, ...]:
        return tuple(self._notes)

    @property
    def helps(self) -> tuple[str, ...]:
        return tuple(self._helps)

    @property
    def wrapped(self) -> tuple[BaseException, ...]:
        """Wrapped errors in attachment order."""
        return tuple(self._wrapped)

    @property
    def extra_data(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._extra_data))

    @property
    def registry(self) -> Registry | None:
        """Bound registry, or None if unbound or the registry was collected."""
        if self._registry_ref is None:
            return None
        return self._registry_ref()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render this error and everything it wraps.

        Never raises: a broken custom fragment degrades to the bare message
        and the failure is logged.
        """
        from diagnostix.runtime.renderer import render_error  # noqa: PLC0415 - circular

        return render_error(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"


def new(message: str) -> DiagnosticError:
    """Create a DiagnosticError bound to the process default registry."""
    return DiagnosticError(message)


def newf(format_string: str, *args: object) -> DiagnosticError:
    """Create a DiagnosticError from a printf-style format.

    Example:
        >>> newf("unknown key %r", "colour").message
        "unknown key 'colour'"
    """
    return new(_format(format_string, args))


def extend(err: BaseException) -> DiagnosticError:
    """Upgrade any exception to a DiagnosticError.

    A DiagnosticError is returned as-is (same object), so extend() is
    idempotent. Any other exception becomes a fresh DiagnosticError whose
    message is the exception's text (its class name when the text is empty).
    """
    if isinstance(err, DiagnosticError):
        return err
    err = _check_error(err, "error")
    return new(str(err) or type(err).__name__)


def extend_with_message(err: BaseException, message: str) -> DiagnosticError:
    """Upgrade an exception, replacing its message.

    Warning:
        A DiagnosticError input is modified in place and returned; treat
        the argument as consumed.
    """
    if isinstance(err, DiagnosticError):
        err._message = _check_message(message)  # noqa: SLF001  # pylint: disable=protected-access
        err.args = (err._message,)  # noqa: SLF001  # pylint: disable=protected-access
        return err
    _check_error(err, "error")
    return new(message)
