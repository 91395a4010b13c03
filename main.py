from __future__ import annotations
import json
import logging
import sys
from typing import List, Optional, TextIO
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from errors import ParseError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

logger = logging.getLogger(__name__)

PROMPT = "Enter an expression: "


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str, strict: bool = False) -> ASTNode:
    """Parse one line of text into an AST."""
    parser = Parser(Lexer(text), strict=strict)
    return parser.parse()


def process_line(
    text: str,
    *,
    print_tokens: bool = False,
    output: str = "tree",
    strict: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single line: lex, parse and print the tree.

    Returns True if the line parsed. Parse errors are reported as
    `Error: <message>` on stderr followed by `Parsing failed.` on stdout.
    """
    if print_tokens:
        tokens = lex(text)
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token}")

    try:
        ast = parse_text(text, strict=strict)
    except ParseError as e:
        logger.debug("parse of %r failed: %r", text, e)
        print(f"Error: {e}", file=sys.stderr)
        print("Parsing failed.")
        return False

    if output == "json":
        print(json.dumps(ast_to_json(ast), indent=2))
    else:
        print("\nParsed AST:")
        print(PrettyPrinter.print_ast(ast))

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def run_lines(lines: TextIO, prompt: Optional[str] = None, **options) -> int:
    """Process lines until an empty line or end of input.

    Returns the number of lines processed.
    """
    count = 0
    while True:
        if prompt is not None:
            print(prompt, end="", flush=True)
        line = lines.readline()
        if not line:
            break
        text = line.rstrip("\n")
        if not text:
            break

        process_line(text, **options)
        print()
        count += 1
    return count


def interactive_mode(**options) -> None:
    """Run the read-parse-print loop on stdin."""
    try:
        run_lines(sys.stdin, prompt=PROMPT, **options)
    except KeyboardInterrupt:
        print("\n\nExiting...")


def file_mode(path: str, **options) -> None:
    """Process each line of a file, stopping at the first empty line."""
    with open(path, "r", encoding="utf-8") as fh:
        run_lines(fh, **options)


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse arithmetic expressions and print their syntax trees"
    )
    parser.add_argument(
        "--file", "-f", dest="file", help="Read expressions from a file, one per line"
    )
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--json",
        dest="output",
        action="store_const",
        const="json",
        default="tree",
        help="Print the AST as JSON instead of an indented tree",
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Reject lines with tokens left over after the expression",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_path",
        help="Path (without extension) to write a Graphviz rendering of each AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = dict(
        print_tokens=args.print_tokens,
        output=args.output,
        strict=args.strict,
        viz_path=args.viz_path,
        viz_format=args.viz_format,
    )

    if args.file:
        try:
            file_mode(args.file, **options)
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    else:
        interactive_mode(**options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
