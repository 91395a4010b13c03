"""Token definitions for the lexer.

This module defines the `TokenType` enum for the four token kinds recognized
by the lexer and a small `Token` dataclass that holds a token type and its
value. Tokens are produced one at a time by the lexer and consumed immediately
by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Any other single non-alphanumeric, non-whitespace character
    SYMBOL = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    type: TokenType
    value: Optional[str | float] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)

    def is_symbol(self, char: str) -> bool:
        """True if this is the single-character symbol `char`."""
        return self.type == TokenType.SYMBOL and self.value == char
