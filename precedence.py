"""Binary operator precedence table.

`BINOP_PRECEDENCE` maps each single-character binary operator to its binding
power (higher binds tighter). The table is read-only; a parser can be given a
different mapping, but nothing ever writes to this one.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping
from tokens import Token, TokenType

NOT_AN_OPERATOR = -1

BINOP_PRECEDENCE: Mapping[str, int] = MappingProxyType(
    {
        "<": 10,
        "+": 20,
        "-": 20,
        "*": 40,
        "/": 50,
    }
)


def get_precedence(token: Token, table: Mapping[str, int] = BINOP_PRECEDENCE) -> int:
    """Return the precedence of `token` as a binary operator, or -1."""
    if token.type != TokenType.SYMBOL:
        return NOT_AN_OPERATOR
    if not (token.value.isascii() and token.value.isprintable()):
        return NOT_AN_OPERATOR

    precedence = table.get(token.value, 0)
    if precedence <= 0:
        return NOT_AN_OPERATOR
    return precedence
