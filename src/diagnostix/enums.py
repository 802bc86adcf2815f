"""Enumerations for diagnostix type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be used directly as
fragment names and style keys.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["FragmentName", "Style"]


class FragmentName(StrEnum):
    """Built-in render fragments.

    StrEnum provides automatic string conversion: str(FragmentName.CAUSE) == "cause"
    """

    MESSAGE_PREFIX = "message-prefix"
    """Severity tag in front of the message: error[E0123]"""

    CAUSE = "cause"
    """Root cause block: --> first line / | continuation lines"""

    NOTES = "notes"
    """Annotations: = note: ..."""

    HELPS = "helps"
    """Remediation hints: = help: ..."""


class Style(StrEnum):
    """Text decoration styles understood by the decoration capability."""

    BOLD = "bold"
    BOLD_RED = "bold-red"
    BOLD_BLUE = "bold-blue"
    BOLD_GREEN = "bold-green"
    BOLD_YELLOW = "bold-yellow"
