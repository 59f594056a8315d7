# normalizer.py

import logging
import re

logger = logging.getLogger(__name__)

_DOUBLE_MINUS = re.compile(r"--")
_PLUS_RUN = re.compile(r"\++")
_MIXED_SIGNS = re.compile(r"-\+|\+-")


def _collapse_once(text: str) -> str:
    out = _DOUBLE_MINUS.sub("+", text)
    out = _PLUS_RUN.sub("+", out)
    out = _MIXED_SIGNS.sub("-", out)
    return out


def normalize(text: str) -> str:
    """Collapse redundant sign sequences into a single operator.

    Pairs of '-' become '+', runs of '+' become one '+', and a mixed '-+' or
    '+-' pair becomes '-'. The rules are reapplied until nothing changes, so
    the result is stable: normalize(normalize(s)) == normalize(s).

        >>> normalize("5--3")
        '5+3'
        >>> normalize("5---3")
        '5-3'
    """
    current = text
    while True:
        collapsed = _collapse_once(current)
        if collapsed == current:
            break
        current = collapsed
    if current != text:
        logger.debug(f"Normalized {text!r} to {current!r}")
    return current
