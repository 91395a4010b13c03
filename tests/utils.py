from lexer import Lexer
from parser import Parser
from pretty_printer import PrettyPrinter


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str, **kwargs):
    """Convenience: lex+parse a line of text into an AST."""
    return Parser(Lexer(text), **kwargs).parse()


def surface(text: str) -> str:
    """Parse `text` and render it fully parenthesized."""
    return PrettyPrinter.print_surface(parse_text(text))
