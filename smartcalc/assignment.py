# assignment.py

import logging

from smartcalc.status import Status
from smartcalc.variables import VariableTable

logger = logging.getLogger(__name__)


def _parse_int(text: str):
    try:
        return int(text)
    except ValueError:
        return None


def assign(text: str, variables: VariableTable) -> Status:
    """Bind the left side of a validated 'name=value' line.

    The value is either an integer literal or the name of another variable,
    whose current value is copied. Referring to an unbound variable leaves the
    table untouched and returns UNKNOWN_VAR.
    """
    name, source = text.split('=', 1)
    value = _parse_int(source)
    if value is None:
        value = variables.get(source)
        if value is None:
            logger.debug(f"Cannot assign {name!r}: {source!r} is unbound")
            return Status.UNKNOWN_VAR
    variables.bind(name, value)
    logger.debug(f"Bound {name!r} to {value}")
    return Status.OK
