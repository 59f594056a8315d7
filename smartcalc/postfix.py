# postfix.py

"""
Infix to postfix conversion and postfix evaluation.

The process in a nutshell:

    "(a+5)*b"  --to_postfix()-->  "a 5 + b *"  --evaluate_postfix()-->  int

Operands in the postfix stream are digit runs or variable names; operators
are '+', '-', '*', '/' and '~', the prefix negation produced for a sign in
unary position ('-3*5', '2*(-3)+1', '-(a+b)').
"""

import logging
from typing import List, Optional, Tuple

from smartcalc.lexer import DIGITS, LETTERS
from smartcalc.status import Status
from smartcalc.variables import VariableTable

logger = logging.getLogger(__name__)

NEGATE = '~'

PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    NEGATE: 3,
}

BINARY_OPERATORS = frozenset('+-*/')

_OPERAND_CHARS = DIGITS | LETTERS


class CalculatorError(Exception):
    """Base class for calculator errors that indicate a defect, not bad input."""
    pass


class MalformedPostfixError(CalculatorError):
    """Raised when a postfix stream leaves the evaluation stack in a bad state."""
    pass


# --------------------------
# Converter
# --------------------------

def to_postfix(expression: str) -> Optional[str]:
    """Convert an infix expression to a space-separated postfix stream.

    Uses the shunting-yard algorithm with '*' and '/' binding tighter than
    '+' and '-', all left-associative. Returns None when the parentheses do
    not balance or an operator other than + - * / turns up.

    See <https://en.wikipedia.org/wiki/Shunting_yard_algorithm>
    """
    out: List[str] = []
    stack: List[str] = []
    operand = ''
    # A sign is unary at the start, after '(' and after another operator
    unary_position = True

    for ch in expression:
        if ch in _OPERAND_CHARS:
            operand += ch
            unary_position = False
            continue
        if operand:
            out.append(operand)
            operand = ''

        if ch == '(':
            stack.append(ch)
            unary_position = True
        elif ch == ')':
            # Pop operators until we hit the matching left bracket
            while stack and stack[-1] != '(':
                out.append(stack.pop())
            if not stack:
                logger.debug(f"Unbalanced ')' in {expression!r}")
                return None
            stack.pop()
            unary_position = False
        elif ch in BINARY_OPERATORS:
            if unary_position:
                if ch == '-':
                    stack.append(NEGATE)
                continue
            while stack and stack[-1] != '(' and PRECEDENCE[stack[-1]] >= PRECEDENCE[ch]:
                out.append(stack.pop())
            stack.append(ch)
            unary_position = True
        else:
            logger.debug(f"Unsupported operator {ch!r} in {expression!r}")
            return None

    if operand:
        out.append(operand)

    # Finally, pop off anything still on the stack
    while stack:
        op = stack.pop()
        if op == '(':
            logger.debug(f"Unbalanced '(' in {expression!r}")
            return None
        out.append(op)

    stream = ' '.join(out)
    logger.debug(f"Postfix for {expression!r}: {stream!r}")
    return stream


# --------------------------
# Evaluator
# --------------------------

def divide(b: int, a: int) -> int:
    """Integer division truncating toward zero: 7/2 == 3, -7/2 == -3.

    Raises ZeroDivisionError when a is zero.
    """
    quotient = abs(b) // abs(a)
    return -quotient if (b < 0) != (a < 0) else quotient


def apply_operator(op: str, b: int, a: int) -> int:
    """Apply a binary operator with b as the left and a as the right operand."""
    if op == '+':
        return b + a
    if op == '-':
        return b - a
    if op == '*':
        return b * a
    if op == '/':
        return divide(b, a)
    raise MalformedPostfixError(f"unknown operator {op!r}")


def evaluate_postfix(stream: str, variables: VariableTable) -> Tuple[Status, Optional[int]]:
    """Evaluate a postfix stream against the variable table.

    Returns (Status.OK, value), or (Status.ID_INVALID, None) when the stream
    names an unbound variable. ZeroDivisionError and MalformedPostfixError
    propagate: both mean the stream itself is unusable.
    """
    stack: List[int] = []

    for token in stream.split(' '):
        if not token:
            continue
        if token.isdigit():
            stack.append(int(token))
        elif token in BINARY_OPERATORS:
            if len(stack) < 2:
                raise MalformedPostfixError(f"not enough operands for {token!r} in {stream!r}")
            a = stack.pop()
            b = stack.pop()
            stack.append(apply_operator(token, b, a))
        elif token == NEGATE:
            if not stack:
                raise MalformedPostfixError(f"nothing to negate in {stream!r}")
            stack.append(-stack.pop())
        elif token in variables:
            stack.append(variables.get(token))
        else:
            logger.debug(f"Unbound identifier {token!r}")
            return Status.ID_INVALID, None

    # At the end of the computation there should be exactly one value left
    if len(stack) != 1:
        raise MalformedPostfixError(f"{len(stack)} values left on the stack for {stream!r}")
    return Status.OK, stack[0]
