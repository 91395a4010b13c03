"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent)` which renders an AST as an
indented tree, one node per line, and `PrettyPrinter.print_surface(node)`
which renders it back as a fully parenthesized one-line expression.

Examples:
    PrettyPrinter.print_ast(tree)
        Binary Op: +
          Number: 1
          Variable: x
    PrettyPrinter.print_surface(tree)
        (1 + x)
"""

from __future__ import annotations
from ast_nodes import *


def format_number(value: float) -> str:
    """Format a number the way a default C++ output stream does (%g)."""
    return f"{value:g}"


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0) -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        match node:
            case NumberExprNode(value=v):
                lines.append(f"{indent_str}Number: {format_number(v)}")

            case VariableExprNode(name=n):
                lines.append(f"{indent_str}Variable: {n}")

            case BinaryExprNode(operator=op, left=left, right=right):
                lines.append(f"{indent_str}Binary Op: {op}")
                lines.append(PrettyPrinter.print_ast(left, indent + 2))
                lines.append(PrettyPrinter.print_ast(right, indent + 2))

            case _:
                lines.append(f"{indent_str}Unknown node type: {type(node)}")

        return "\n".join(lines)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, parenthesized one-line rendering of an AST node."""
        match node:
            case NumberExprNode(value=v):
                return format_number(v)
            case VariableExprNode(name=n):
                return n
            case BinaryExprNode(operator=op, left=l, right=r):
                return (
                    f"({PrettyPrinter.print_surface(l)} {op} "
                    f"{PrettyPrinter.print_surface(r)})"
                )
            case _:
                return str(node)
