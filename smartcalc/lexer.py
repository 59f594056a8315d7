# lexer.py

"""
Tokenizer for calculator input.

Produces a flat, typed token list that the classifier checks against the
statement grammars. The lexer itself never rejects input: characters it does
not recognise become UNKNOWN tokens and the classifier decides what that
means for the statement kind at hand.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import List

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
SIGNS = frozenset("+-")
OPERATORS = frozenset("*/^")


class TokenType(Enum):
    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"
    SIGN = "SIGN"          # run of one repeated sign character, e.g. '-' or '+++'
    OPERATOR = "OPERATOR"  # '*', '/' or '^'
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    EQUALS = "EQUALS"
    UNKNOWN = "UNKNOWN"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """Represents a token with type, source text and character position."""
    type: TokenType
    value: str
    pos: int

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.IDENTIFIER)

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, pos={self.pos})"


class Lexer:
    """Splits a whitespace-free input line into tokens.

    Digits and ASCII letters form separate runs, so 'a1' yields an
    IDENTIFIER followed by a NUMBER. Consecutive identical sign characters
    are kept together as a single SIGN token.
    """
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _advance(self, n: int = 1) -> None:
        self.pos += n

    def _read_run(self, chars) -> str:
        start = self.pos
        while self._peek() and self._peek() in chars:
            self._advance()
        return self.text[start:self.pos]

    def _read_sign(self) -> str:
        return self._read_run(frozenset(self._peek()))

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while self.pos < self.len:
            start = self.pos
            ch = self._peek()
            if ch in DIGITS:
                tokens.append(Token(TokenType.NUMBER, self._read_run(DIGITS), start))
                continue
            if ch in LETTERS:
                tokens.append(Token(TokenType.IDENTIFIER, self._read_run(LETTERS), start))
                continue
            if ch in SIGNS:
                tokens.append(Token(TokenType.SIGN, self._read_sign(), start))
                continue
            if ch in OPERATORS:
                kind = TokenType.OPERATOR
            elif ch == '(':
                kind = TokenType.LPAREN
            elif ch == ')':
                kind = TokenType.RPAREN
            elif ch == '=':
                kind = TokenType.EQUALS
            else:
                kind = TokenType.UNKNOWN
            tokens.append(Token(kind, ch, start))
            self._advance()
        tokens.append(Token(TokenType.EOF, '', self.pos))
        return tokens


def tokenize(text: str) -> List[Token]:
    return Lexer(text).tokenize()
