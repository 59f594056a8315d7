# test_lexer.py

from smartcalc.lexer import Lexer, Token, TokenType, tokenize


def types_of(text):
    return [t.type for t in tokenize(text)]


def test_operands_operators_and_parentheses():
    assert types_of("(ab+12)*c/3^2") == [
        TokenType.LPAREN, TokenType.IDENTIFIER, TokenType.SIGN, TokenType.NUMBER,
        TokenType.RPAREN, TokenType.OPERATOR, TokenType.IDENTIFIER, TokenType.OPERATOR,
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER, TokenType.EOF,
    ]


def test_mixed_alphanumeric_splits_into_runs():
    toks = tokenize("a1b")
    assert [(t.type, t.value) for t in toks[:-1]] == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.NUMBER, "1"),
        (TokenType.IDENTIFIER, "b"),
    ]


def test_repeated_signs_form_one_token_per_character_kind():
    toks = tokenize("5---+3")
    assert [t.value for t in toks if t.type == TokenType.SIGN] == ["---", "+"]


def test_unknown_characters_and_equals():
    toks = tokenize("x=1.5_é")
    kinds = [t.type for t in toks]
    assert TokenType.EQUALS in kinds
    assert [t.value for t in toks if t.type == TokenType.UNKNOWN] == [".", "_", "é"]


def test_positions_and_eof():
    toks = Lexer("ab*12").tokenize()
    assert toks[0] == Token(TokenType.IDENTIFIER, "ab", 0)
    assert toks[1].pos == 2
    assert toks[2].pos == 3
    assert toks[-1] == Token(TokenType.EOF, "", 5)


def test_empty_input_is_only_eof():
    assert types_of("") == [TokenType.EOF]


def test_non_ascii_digits_are_not_numbers():
    assert types_of("٣") == [TokenType.UNKNOWN, TokenType.EOF]
