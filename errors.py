"""Parse errors.

Every parse failure is a `ParseError`. It aborts the whole expression; the
parser never returns a partial tree.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class ParseError(SyntaxError):
    """Raised when the parser cannot build an expression from the tokens."""

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self) -> str:
        return self.message


class UnexpectedTokenError(ParseError):
    """A number, identifier or '(' was expected but something else was found."""


class UnclosedParenthesisError(ParseError):
    """A '(' was opened but the matching ')' never arrived."""


class TrailingTokensError(ParseError):
    """Tokens were left over after a complete expression (strict mode)."""


class NestingTooDeepError(ParseError):
    """Parentheses nest deeper than the parser's recursion can follow."""
