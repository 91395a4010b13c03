"""AST node definitions for the expression language.

There are exactly three node kinds: numeric literals, variable references and
binary operations. Each is a dataclass carrying its `NodeType`, so later
stages (printers, serializers) can pattern-match on the node class or on
`node.type`.

Conventions:
- A `BinaryExprNode` owns its `left` and `right` children. Trees are never
    shared between parents and are not modified once the parser returns them.
- Parenthesized groups have no node of their own; they only affect shape.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto


class NodeType(Enum):
    NUMBER = auto()
    VARIABLE = auto()
    BINARY = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType


@dataclass
class NumberExprNode(ASTNode):
    type: NodeType = NodeType.NUMBER
    value: float = 0.0


@dataclass
class VariableExprNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    # Just a name; nothing is resolved at parse time.
    name: str = ""


@dataclass
class BinaryExprNode(ASTNode):
    type: NodeType = NodeType.BINARY
    operator: str = ""
    left: ASTNode = field(default_factory=lambda: NumberExprNode())
    right: ASTNode = field(default_factory=lambda: NumberExprNode())
