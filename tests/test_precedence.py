import pytest

from precedence import BINOP_PRECEDENCE, NOT_AN_OPERATOR, get_precedence
from tokens import Token, TokenType


def sym(ch):
    return Token(TokenType.SYMBOL, ch)


def test_default_table_ordering():
    p = {op: get_precedence(sym(op)) for op in "<+-*/"}
    assert p["/"] > p["*"] > p["+"] == p["-"] > p["<"] > 0
    assert p == {"<": 10, "+": 20, "-": 20, "*": 40, "/": 50}


def test_non_operators_get_sentinel():
    assert get_precedence(sym("(")) == NOT_AN_OPERATOR
    assert get_precedence(sym("÷")) == NOT_AN_OPERATOR
    assert get_precedence(Token(TokenType.NUMBER, 1.0)) == NOT_AN_OPERATOR
    assert get_precedence(Token(TokenType.IDENTIFIER, "x")) == NOT_AN_OPERATOR
    assert get_precedence(Token(TokenType.EOF, None)) == NOT_AN_OPERATOR


def test_non_positive_entries_are_not_operators():
    table = {"+": 20, "<": 0, "%": -5}
    assert get_precedence(sym("+"), table) == 20
    assert get_precedence(sym("<"), table) == NOT_AN_OPERATOR
    assert get_precedence(sym("%"), table) == NOT_AN_OPERATOR


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        BINOP_PRECEDENCE["^"] = 60
    assert "^" not in BINOP_PRECEDENCE


def test_control_characters_are_never_operators():
    table = {"\x01": 30, "+": 20}
    assert get_precedence(sym("\x01"), table) == NOT_AN_OPERATOR
    assert get_precedence(sym("+"), table) == 20
