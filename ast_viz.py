"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the rendered file to disk.

Layout: every AST node becomes one graph node, labelled the same way the
tree printer labels it. Binary nodes get an `L` edge to their left operand
and an `R` edge to their right operand.
"""

import itertools
from graphviz import Digraph
from ast_nodes import *
from pretty_printer import format_number


def _label(node: ASTNode) -> str:
    match node:
        case NumberExprNode(value=v):
            return format_number(v)
        case VariableExprNode(name=n):
            return n
        case BinaryExprNode(operator=op):
            return op
    return str(node.type)


def _shape(node: ASTNode) -> str:
    return "circle" if node.type == NodeType.BINARY else "box"


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")

    ids = itertools.count()

    # Preorder walk; the id of each node is its visit index.
    def emit(n: ASTNode) -> str:
        name = f"n{next(ids)}"
        dot.node(name, label=_label(n), shape=_shape(n))
        if isinstance(n, BinaryExprNode):
            dot.edge(name, emit(n.left), label="L")
            dot.edge(name, emit(n.right), label="R")
        return name

    emit(node)
    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(tree, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
