"""Terminal text decoration.

Styles text (bold, bold red, ...) with yachalk. Decoration is a no-op when
colour output is disabled, so rendered diagnostics stay plain text in logs,
pipes, and tests.

Colour decision (evaluated at call time):
    1. An explicit override set with set_color_enabled()
    2. NO_COLOR set (any value) -> disabled
    3. Otherwise yachalk's detected colour mode (FORCE_COLOR, TERM, and
       whether stdout is a TTY, as detected when yachalk is imported)

set_color_enabled() drives yachalk's colour mode, so forcing colour on
works even when yachalk detected a pipe.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from yachalk import chalk
from yachalk.types import ColorMode

from .enums import Style

__all__ = [
    "bold",
    "bold_blue",
    "bold_green",
    "bold_red",
    "bold_yellow",
    "color_enabled",
    "decorate",
    "set_color_enabled",
]

# Builders are looked up per call: yachalk applies its current colour mode
# when a builder chain is created.
_STYLES: dict[Style, Callable[[], Callable[..., str]]] = {
    Style.BOLD: lambda: chalk.bold,
    Style.BOLD_RED: lambda: chalk.red.bold,
    Style.BOLD_BLUE: lambda: chalk.blue.bold,
    Style.BOLD_GREEN: lambda: chalk.green.bold,
    Style.BOLD_YELLOW: lambda: chalk.yellow.bold,
}

_DETECTED_MODE: ColorMode = chalk.get_color_mode()

# None means "follow NO_COLOR and yachalk's detection"
_color_override: bool | None = None


def set_color_enabled(enabled: bool | None) -> None:
    """Force colour output on or off.

    Args:
        enabled: True/False to force, None to return to auto-detection
    """
    global _color_override  # noqa: PLW0603  # pylint: disable=global-statement
    _color_override = enabled
    if enabled is None:
        chalk.set_color_mode(_DETECTED_MODE)
    elif enabled:
        on = ColorMode.Basic16 if _DETECTED_MODE == ColorMode.AllOff else _DETECTED_MODE
        chalk.set_color_mode(on)
    else:
        chalk.set_color_mode(ColorMode.AllOff)


def color_enabled() -> bool:
    """Return whether decorate() currently emits ANSI sequences."""
    if _color_override is not None:
        return _color_override
    if "NO_COLOR" in os.environ:
        return False
    return chalk.get_color_mode() != ColorMode.AllOff


def decorate(style: Style | str, text: object) -> str:
    """Style text.

    Args:
        style: Style member or its string value (e.g. "bold-red")
        text: Value to decorate; converted with str()

    Returns:
        Decorated string, or plain str(text) when colour is disabled

    Raises:
        ValueError: If style is not a known style name
    """
    builder = _STYLES[Style(style)]
    plain = str(text)
    if not color_enabled():
        return plain
    return builder()(plain)


def bold(text: object) -> str:
    """Bold text."""
    return decorate(Style.BOLD, text)


def bold_red(text: object) -> str:
    """Bold red text."""
    return decorate(Style.BOLD_RED, text)


def bold_blue(text: object) -> str:
    """Bold blue text."""
    return decorate(Style.BOLD_BLUE, text)


def bold_green(text: object) -> str:
    """Bold green text."""
    return decorate(Style.BOLD_GREEN, text)


def bold_yellow(text: object) -> str:
    """Bold yellow text."""
    return decorate(Style.BOLD_YELLOW, text)
