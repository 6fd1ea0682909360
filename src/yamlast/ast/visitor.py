"""Visitor pattern for AST traversal, value extraction and serialization."""

from __future__ import annotations

from typing import Any

from yamlast.ast.nodes import (
    ArrayNode,
    ASTNode,
    BooleanNode,
    NullNode,
    NumberNode,
    ObjectNode,
    PropertyNode,
    StringNode,
)


class ASTVisitor:
    """Base visitor for YAML AST traversal.

    Override specific visit_* methods to customize behavior.
    The default implementations recursively visit child nodes.
    """

    def visit(self, node: ASTNode) -> Any:
        """Dispatch to the appropriate visit_* method."""
        method_name = f"visit_{node.type.value}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node)

    def generic_visit(self, node: ASTNode) -> Any:
        return node

    def visit_object(self, node: ObjectNode) -> Any:
        for prop in node.properties:
            self.visit(prop)
        return node

    def visit_property(self, node: PropertyNode) -> Any:
        self.visit(node.key_node)
        self.visit(node.value_node)
        return node

    def visit_array(self, node: ArrayNode) -> Any:
        for item in node.items:
            self.visit(item)
        return node


class ValueVisitor(ASTVisitor):
    """Converts a subtree into the plain Python value it denotes.

    Later properties win over earlier ones with the same key, matching what a
    JSON consumer would see.
    """

    def visit_object(self, node: ObjectNode) -> dict[str, Any]:
        return {prop.key_node.value: self.visit(prop.value_node) for prop in node.properties}

    def visit_property(self, node: PropertyNode) -> Any:
        return self.visit(node.value_node)

    def visit_array(self, node: ArrayNode) -> list[Any]:
        return [self.visit(item) for item in node.items]

    def visit_string(self, node: StringNode) -> str:
        return node.value

    def visit_number(self, node: NumberNode) -> int | float:
        return node.value

    def visit_boolean(self, node: BooleanNode) -> bool:
        return node.value

    def visit_null(self, node: NullNode) -> None:
        return None


class JSONVisitor(ASTVisitor):
    """Serializes a subtree to position-annotated dicts (parent links omitted)."""

    def generic_visit(self, node: ASTNode) -> dict[str, Any]:
        return {"type": node.type.value, "offset": node.offset, "length": node.length}

    def visit_object(self, node: ObjectNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["properties"] = [self.visit(prop) for prop in node.properties]
        return result

    def visit_property(self, node: PropertyNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["key"] = self.visit(node.key_node)
        result["value"] = self.visit(node.value_node)
        return result

    def visit_array(self, node: ArrayNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["items"] = [self.visit(item) for item in node.items]
        return result

    def visit_string(self, node: StringNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["value"] = node.value
        return result

    def visit_number(self, node: NumberNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["value"] = node.value
        result["is_integer"] = node.is_integer
        return result

    def visit_boolean(self, node: BooleanNode) -> dict[str, Any]:
        result = self.generic_visit(node)
        result["value"] = node.value
        return result


def node_value(node: ASTNode) -> Any:
    """Return the plain Python value of ``node`` and its descendants."""
    return ValueVisitor().visit(node)


def to_json(node: ASTNode) -> dict[str, Any]:
    """Return a JSON-compatible dict describing ``node`` and its descendants."""
    return JSONVisitor().visit(node)


def find_node_at_offset(
    node: ASTNode | None, offset: int, include_right_bound: bool = False
) -> ASTNode | None:
    """Return the innermost node whose span covers ``offset``."""
    if node is None or not node.contains(offset, include_right_bound):
        return None
    # Last to first: a later sibling wins on a shared bound.
    for child in reversed(node.children):
        found = find_node_at_offset(child, offset, include_right_bound)
        if found is not None:
            return found
    return node
