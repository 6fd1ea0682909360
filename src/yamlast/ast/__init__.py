"""Position-annotated JSON AST for YAML documents."""

from yamlast.ast.nodes import (
    ArrayNode,
    ASTNode,
    BooleanNode,
    NodeType,
    NullNode,
    NumberNode,
    ObjectNode,
    PropertyNode,
    StringNode,
)
from yamlast.ast.visitor import ASTVisitor, find_node_at_offset, node_value, to_json

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "ArrayNode",
    "BooleanNode",
    "NodeType",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "PropertyNode",
    "StringNode",
    "find_node_at_offset",
    "node_value",
    "to_json",
]
