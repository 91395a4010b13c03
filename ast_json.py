"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/primitives describing the AST node: the node kind plus its fields.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Optional[Dict[str, Any]]:
    if node is None:
        return None

    match node:
        case NumberExprNode(value=v):
            return {"node_type": "Number", "value": v}
        case VariableExprNode(name=n):
            return {"node_type": "Variable", "name": n}
        case BinaryExprNode(operator=op, left=left, right=right):
            return {
                "node_type": "Binary",
                "operator": op,
                "left": ast_to_json(left),
                "right": ast_to_json(right),
            }

    raise TypeError(f"Cannot serialize {type(node).__name__}")
