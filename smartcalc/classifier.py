# classifier.py

"""
Statement classification.

A normalized input line is one of: a command ('/exit', '/help'), an
assignment ('a=5', 'a=b'), a single operand to print ('a', '-42'), or an
arithmetic expression. classify() works out which, checks the line against
the grammar for that kind and returns a Status. Single operands are resolved
here as well, since printing them needs nothing beyond a table lookup.

The accepted languages are deliberately narrow and a little quirky (for
example '2*(-3)' is rejected while '2*(-3)+1' is accepted); the token-level
checks below reproduce them exactly rather than tidying them up.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from smartcalc.lexer import Token, TokenType, tokenize
from smartcalc.status import Status
from smartcalc.variables import VariableTable

logger = logging.getLogger(__name__)

COMMANDS = {
    '/exit': Status.EXIT,
    '/help': Status.COMMAND,
}


@dataclass(frozen=True)
class Classification:
    """Status of a classified line plus the value printed for single operands."""
    status: Status
    value: Optional[int] = None


def _is_single_sign(token: Token) -> bool:
    return token.type == TokenType.SIGN and len(token.value) == 1


# --------------------------
# Assignment
# --------------------------

def check_assignment(text: str) -> Status:
    """Validate 'name=value' where value is a name or an optionally negative integer."""
    tokens = tokenize(text)
    split_at = next(i for i, tok in enumerate(tokens) if tok.type == TokenType.EQUALS)
    left = tokens[:split_at]
    right = tokens[split_at + 1:-1]

    if len(left) != 1 or left[0].type != TokenType.IDENTIFIER:
        return Status.ID_INVALID
    if len(right) == 1 and right[0].is_operand:
        return Status.ASSIGNMENT
    if (len(right) == 2 and right[0].type == TokenType.SIGN and right[0].value == '-'
            and right[1].type == TokenType.NUMBER):
        return Status.ASSIGNMENT
    return Status.ASSIGNMENT_INVALID


# --------------------------
# Single operand
# --------------------------

def takes_single_operand_branch(text: str) -> bool:
    """Decide whether a line is handled as a lone identifier or number.

    True when the line is all letters, or when everything strictly between
    its first and last character is a digit. Lines of up to two characters
    always qualify; the operand check that follows rejects the ones that are
    not operands after all ('5+', '(5)', 'a1').
    """
    return all(ch.isalpha() for ch in text) or all(ch.isdecimal() for ch in text[1:-1])


def is_single_operand(tokens: List[Token]) -> bool:
    body = tokens[:-1]
    if body and _is_single_sign(body[0]):
        body = body[1:]
    return len(body) == 1 and body[0].is_operand


def resolve_operand(text: str, variables: VariableTable) -> Optional[int]:
    """Value of a validated single operand, or None for an unbound identifier.

    Integer literals, signed or not, resolve to themselves. Identifiers are
    looked up exactly as written, so a signed name such as '-a' is never bound.
    """
    if text.lstrip('+-').isdigit():
        return int(text)
    return variables.get(text)


# --------------------------
# Expression
# --------------------------

# Positions of the expression recognizer
_START = 0            # before the first operand: '(' or a single sign
_SIGNED = 1           # just read a sign: only '(' or an operand may follow
_OPERAND = 2          # just read an operand: ')' or an operator may follow
_AFTER_OPERATOR = 3   # just read an operator: any parentheses, a sign, an operand


def is_valid_expression(tokens: List[Token]) -> bool:
    """Check a token list against the infix expression grammar.

    Grammar (as a regular expression over the source text):

        ( \\(* [+-]? \\(* OPERAND \\)* OP [()]* )+ OPERAND \\)*

    where OPERAND is a digit run or a letter run and OP is a run of '+', a
    run of '-', '*', '/' or '^'. Parenthesis balance is not checked here.
    """
    state = _START
    operators = 0
    signed = False

    for tok in tokens:
        kind = tok.type
        if kind == TokenType.EOF:
            break
        if state == _START:
            if kind == TokenType.LPAREN:
                continue
            if _is_single_sign(tok):
                signed, state = True, _SIGNED
            elif tok.is_operand:
                signed, state = False, _OPERAND
            else:
                return False
        elif state == _SIGNED:
            if kind == TokenType.LPAREN:
                continue
            if not tok.is_operand:
                return False
            state = _OPERAND
        elif state == _OPERAND:
            if kind == TokenType.RPAREN:
                continue
            if kind not in (TokenType.SIGN, TokenType.OPERATOR):
                return False
            operators += 1
            signed, state = False, _AFTER_OPERATOR
        else:
            if kind in (TokenType.LPAREN, TokenType.RPAREN):
                continue
            if _is_single_sign(tok):
                signed, state = True, _SIGNED
            elif tok.is_operand:
                signed, state = False, _OPERAND
            else:
                return False

    return state == _OPERAND and operators > 0 and not signed


# --------------------------
# Entry point
# --------------------------

def classify(text: str, variables: VariableTable) -> Classification:
    """Classify a whitespace-free, normalized input line."""
    if text.startswith('/'):
        return Classification(COMMANDS.get(text, Status.COMMAND_INVALID))

    if '=' in text:
        return Classification(check_assignment(text))

    tokens = tokenize(text)
    logger.debug(f"Tokens for {text!r}: {tokens}")

    if takes_single_operand_branch(text):
        if not is_single_operand(tokens):
            return Classification(Status.ID_INVALID)
        value = resolve_operand(text, variables)
        if value is None:
            return Classification(Status.UNKNOWN_VAR)
        return Classification(Status.CONTINUE, value)

    if not is_valid_expression(tokens):
        return Classification(Status.EXPR_INVALID)
    return Classification(Status.OK)
