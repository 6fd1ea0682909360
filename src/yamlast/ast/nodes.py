"""JSON-shaped AST nodes with source offsets.

Every node records the character ``offset`` and ``length`` of the YAML text it
came from. Composite nodes own their children; ``parent`` points back up the
tree for navigation only and is left out of equality and ``repr``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class NodeType(StrEnum):
    OBJECT = "object"
    PROPERTY = "property"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(eq=False)
class _Node:
    parent: ASTNode | None = field(repr=False)
    offset: int
    length: int

    type: ClassVar[NodeType]

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def children(self) -> list[ASTNode]:
        return []

    def contains(self, offset: int, include_right_bound: bool = False) -> bool:
        return self.offset <= offset < self.end or (include_right_bound and offset == self.end)


@dataclass(eq=False)
class ObjectNode(_Node):
    """A YAML mapping."""

    properties: list[PropertyNode] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.OBJECT

    @property
    def children(self) -> list[ASTNode]:
        return list(self.properties)


@dataclass(eq=False)
class PropertyNode(_Node):
    """One key/value entry of an object.

    ``key_node`` and ``value_node`` are assigned by the builder right after the
    property itself exists, since both children point back at it.
    """

    key_node: StringNode = field(init=False)
    value_node: ASTNode = field(init=False)

    type: ClassVar[NodeType] = NodeType.PROPERTY

    @property
    def children(self) -> list[ASTNode]:
        return [self.key_node, self.value_node]


@dataclass(eq=False)
class ArrayNode(_Node):
    """A YAML sequence."""

    items: list[ASTNode] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.ARRAY

    @property
    def children(self) -> list[ASTNode]:
        return list(self.items)


@dataclass(eq=False)
class StringNode(_Node):
    value: str = ""

    type: ClassVar[NodeType] = NodeType.STRING


@dataclass(eq=False)
class NumberNode(_Node):
    value: int | float = 0
    is_integer: bool = True

    type: ClassVar[NodeType] = NodeType.NUMBER


@dataclass(eq=False)
class BooleanNode(_Node):
    value: bool = False

    type: ClassVar[NodeType] = NodeType.BOOLEAN


@dataclass(eq=False)
class NullNode(_Node):
    type: ClassVar[NodeType] = NodeType.NULL

    @property
    def value(self) -> None:
        return None


# The union of all AST node types.
ASTNode = (
    ObjectNode
    | PropertyNode
    | ArrayNode
    | StringNode
    | NumberNode
    | BooleanNode
    | NullNode
)
