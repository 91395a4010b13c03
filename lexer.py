"""
Lexer for the expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    turns one line of source text into `Token` objects defined in `tokens.py`,
    one token per call to `get_next_token()`.
- It recognizes identifiers (a letter followed by letters or digits),
    numeric literals (runs of digits and `.`), and hands every other
    non-whitespace character to the parser as a single-character `SYMBOL`.

Examples:
    Input:  "(a + 2.5) * b1"
    Tokens: [SYMBOL('('), IDENTIFIER('a'), SYMBOL('+'), NUMBER(2.5),
             SYMBOL(')'), SYMBOL('*'), IDENTIFIER('b1'), EOF]

Implementation notes:
- The scanner keeps exactly one character of lookahead in `self.last_char`.
    It starts out as a blank so the first call skips straight into the text.
    Construct a new `Lexer` (or call `reset`) for every input line.
- Numeric literals are not validated. `1.2.3` is scanned as one literal and
    converted by taking its longest valid decimal prefix, so it yields 1.2.
- The lexer never raises: unknown characters become `SYMBOL` tokens and are
    rejected later by the parser.
"""

from __future__ import annotations
import logging
import re
import string
from typing import Optional, List
from tokens import Token, TokenType

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"\d+\.?\d*|\.\d+")


def _is_alpha(ch: Optional[str]) -> bool:
    return ch is not None and ch in string.ascii_letters


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in string.digits


def _is_space(ch: Optional[str]) -> bool:
    return ch is not None and ch.isspace()


def to_number(text: str) -> float:
    """Convert a scanned literal, ignoring anything after its valid prefix."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


class Lexer:
    def __init__(self, text: str):
        self.reset(text)

    def reset(self, text: str) -> None:
        """Start scanning a new line of text."""
        self.text = text
        self.pos = 0
        self.last_char: Optional[str] = " "

    def next_char(self) -> Optional[str]:
        """Consume and return the next raw character, or None at the end."""
        if self.pos >= len(self.text):
            return None
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while _is_space(self.last_char):
            self.last_char = self.next_char()

        # Identifiers: a letter, then letters or digits.
        if _is_alpha(self.last_char):
            result = [self.last_char]
            self.last_char = self.next_char()
            while _is_alpha(self.last_char) or _is_digit(self.last_char):
                result.append(self.last_char)
                self.last_char = self.next_char()
            token = Token(TokenType.IDENTIFIER, "".join(result))

        # Numbers: digits and dots, converted permissively.
        elif _is_digit(self.last_char) or self.last_char == ".":
            result = []
            while _is_digit(self.last_char) or self.last_char == ".":
                result.append(self.last_char)
                self.last_char = self.next_char()
            token = Token(TokenType.NUMBER, to_number("".join(result)))

        elif self.last_char is None:
            token = Token(TokenType.EOF, None)

        else:
            token = Token(TokenType.SYMBOL, self.last_char)
            self.last_char = self.next_char()

        logger.debug("lexed %r", token)
        return token

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens, ending with EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
