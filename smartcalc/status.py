# status.py

"""
Status codes returned by every stage of the expression pipeline.

Errors never leave the core as exceptions; each stage hands back one of these
values and the shell decides what to print.
"""

from enum import Enum
from typing import Optional


class Status(Enum):
    """Closed set of classification and evaluation outcomes."""
    OK = 0
    COMMAND_INVALID = 1
    EXPR_INVALID = 2
    ID_INVALID = 3
    ASSIGNMENT_INVALID = 4
    COMMAND = 5
    ASSIGNMENT = 6
    EXIT = 7
    CONTINUE = 8
    UNKNOWN_VAR = 9

    @property
    def is_error(self) -> bool:
        return self in USER_ERRORS


USER_ERRORS = frozenset({
    Status.COMMAND_INVALID,
    Status.EXPR_INVALID,
    Status.ID_INVALID,
    Status.ASSIGNMENT_INVALID,
    Status.UNKNOWN_VAR,
})

_MESSAGES = {
    Status.COMMAND_INVALID: "Unknown command",
    Status.UNKNOWN_VAR: "Unknown variable",
    Status.EXPR_INVALID: "Invalid expression",
    Status.ID_INVALID: "Invalid identifier",
    Status.ASSIGNMENT_INVALID: "Invalid assignment",
}


def describe(status: Status) -> Optional[str]:
    """Return the one-line diagnostic for a user-input error, None otherwise."""
    return _MESSAGES.get(status)
