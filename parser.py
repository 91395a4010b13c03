"""
Parser for the expression language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser for primary
    expressions combined with precedence climbing (a cut-down Pratt parser)
    for chains of binary infix operators. Precedences come from the mapping
    in `precedence.py`, or from whatever table the parser is given.

Key points:
- The parser pulls tokens from a `Lexer` one at a time through
    `self.current`. There is a single token of lookahead and no pushback.
- `parse_primary()` recognizes numbers, identifiers and parenthesized
    expressions. Parentheses produce no node of their own.
- `parse_binary_rhs()` implements the climbing loop: while the current token
    is an operator at least as strong as the minimum, bind it. If the operator
    after the right operand binds strictly tighter, recurse first so it grabs
    that operand. Equal precedences therefore associate to the left.
- The first error raises a `ParseError` and abandons the whole expression.

Examples:
    "1 - 2 - 3"   -> Binary('-', Binary('-', 1, 2), 3)
    "1 + 2 * 3"   -> Binary('+', 1, Binary('*', 2, 3))
    "(1 + 2) * 3" -> Binary('*', Binary('+', 1, 2), 3)
"""

from __future__ import annotations
import logging
from typing import Mapping
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *
from errors import (
    NestingTooDeepError,
    TrailingTokensError,
    UnclosedParenthesisError,
    UnexpectedTokenError,
)
from precedence import BINOP_PRECEDENCE, get_precedence

logger = logging.getLogger(__name__)


class Parser:
    def __init__(
        self,
        lexer: Lexer,
        precedence: Mapping[str, int] = BINOP_PRECEDENCE,
        strict: bool = False,
    ):
        self.lexer = lexer
        self.precedence = precedence
        self.strict = strict
        self.current: Token = Token(TokenType.EOF, None)
        self.advance()

    def advance(self) -> Token:
        """Pull the next token from the lexer."""
        self.current = self.lexer.get_next_token()
        return self.current

    def get_precedence(self) -> int:
        """Precedence of the current token as a binary operator, or -1."""
        return get_precedence(self.current, self.precedence)

    def parse_number_expr(self) -> NumberExprNode:
        node = NumberExprNode(value=self.current.value)
        self.advance()
        return node

    def parse_identifier_expr(self) -> VariableExprNode:
        node = VariableExprNode(name=self.current.value)
        self.advance()
        return node

    def parse_paren_expr(self) -> ASTNode:
        """Parse '(' expression ')' and return the inner expression."""
        self.advance()  # Consume '('
        expr = self.parse_expression()
        if not self.current.is_symbol(")"):
            raise UnclosedParenthesisError("Expected ')'", self.current)
        self.advance()  # Consume ')'
        return expr

    def parse_primary(self) -> ASTNode:
        """Parse primary expressions (numbers, identifiers, parenthesized)."""
        token = self.current

        match token.type:
            case TokenType.NUMBER:
                return self.parse_number_expr()

            case TokenType.IDENTIFIER:
                return self.parse_identifier_expr()

            case TokenType.SYMBOL if token.value == "(":
                return self.parse_paren_expr()

            case _:
                raise UnexpectedTokenError(
                    "Unknown token when expecting an expression", token
                )

    def parse_binary_rhs(self, min_precedence: int, left: ASTNode) -> ASTNode:
        """Fold `op primary` pairs onto `left` while operators bind tightly enough."""
        while True:
            precedence = self.get_precedence()
            if precedence < min_precedence:
                return left

            operator = self.current.value
            self.advance()  # Consume operator

            right = self.parse_primary()

            # A tighter operator after `right` takes it as its left operand.
            if precedence < self.get_precedence():
                right = self.parse_binary_rhs(precedence + 1, right)

            logger.debug("binding %r at precedence %d", operator, precedence)
            left = BinaryExprNode(operator=operator, left=left, right=right)

    def parse_expression(self) -> ASTNode:
        """Parse an expression."""
        left = self.parse_primary()
        return self.parse_binary_rhs(0, left)

    def parse(self) -> ASTNode:
        """Parse one expression; in strict mode the line must end there."""
        try:
            expr = self.parse_expression()
        except RecursionError:
            raise NestingTooDeepError(
                "Expression nested too deeply", self.current
            ) from None
        if self.strict and self.current.type != TokenType.EOF:
            raise TrailingTokensError(
                f"Unexpected tokens at end: {self.current.lexeme}", self.current
            )
        return expr
