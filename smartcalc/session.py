# session.py

"""
One calculator session: a variable table plus the per-line pipeline.

    line -> strip whitespace -> normalize() -> classify()
         -> assign() | printed operand | to_postfix() -> evaluate_postfix()

Session.process_line() never prints and never raises for bad input; the shell
gets an Outcome and decides what to show.
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import Optional

from smartcalc.assignment import assign
from smartcalc.classifier import classify
from smartcalc.normalizer import normalize
from smartcalc.postfix import MalformedPostfixError, evaluate_postfix, to_postfix
from smartcalc.status import Status, describe
from smartcalc.variables import VariableTable

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def allow_unbounded_int_strings() -> None:
    """Lift the interpreter's digit limit on int <-> str conversion.

    Python 3.11+ (and late 3.8-3.10 patch releases) refuse to parse or print
    integers longer than 4300 digits by default. The limit is process-wide.
    """
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


@dataclass(frozen=True)
class Outcome:
    """Result of processing one input line.

    ``output`` is the line to show, if any. ``internal`` marks failures that
    come from the conversion/evaluation machinery rather than from the user's
    input (division by zero, a malformed postfix stream).
    """
    status: Status
    output: Optional[str] = None
    internal: bool = False

    @property
    def is_exit(self) -> bool:
        return self.status is Status.EXIT


def _error(status: Status) -> Outcome:
    return Outcome(status, describe(status))


class Session:
    """Processes input lines against a single variable table.

    Not designed for concurrent access: lines must be fed one at a time.
    """

    def __init__(self, variables: Optional[VariableTable] = None):
        allow_unbounded_int_strings()
        self.variables = variables if variables is not None else VariableTable()

    def process_line(self, line: str) -> Outcome:
        text = _WHITESPACE.sub('', line)
        if not text:
            return Outcome(Status.CONTINUE)

        text = normalize(text)
        classification = classify(text, self.variables)
        status = classification.status
        logger.debug(f"Classified {text!r} as {status.name}")

        if status.is_error:
            return _error(status)
        if status in (Status.EXIT, Status.COMMAND):
            return Outcome(status)
        if status is Status.CONTINUE:
            return Outcome(status, str(classification.value))
        if status is Status.ASSIGNMENT:
            assigned = assign(text, self.variables)
            if assigned.is_error:
                return _error(assigned)
            return Outcome(Status.ASSIGNMENT)
        return self._evaluate(text)

    def _evaluate(self, text: str) -> Outcome:
        stream = to_postfix(text)
        if stream is None:
            return _error(Status.EXPR_INVALID)
        try:
            status, value = evaluate_postfix(stream, self.variables)
        except ZeroDivisionError:
            logger.error(f"Division by zero while evaluating {text!r}")
            return Outcome(Status.CONTINUE, "Error: division by zero", internal=True)
        except MalformedPostfixError as e:
            logger.error(f"Malformed postfix stream for {text!r}: {e}")
            return Outcome(Status.CONTINUE, f"Error: {e}", internal=True)
        if status.is_error:
            return _error(status)
        return Outcome(Status.OK, str(value))
