"""Parsed YAML documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from yamlast.ast.nodes import ASTNode
from yamlast.ast.visitor import find_node_at_offset
from yamlast.models.errors import Diagnostic, Position
from yamlast.positions import get_position


@dataclass
class Document:
    """One ``---``-delimited YAML document converted to the JSON AST."""

    line_starts: list[int]
    root: ASTNode | None = None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    def position_at(self, offset: int) -> Position:
        return get_position(offset, self.line_starts)

    def node_at_offset(self, offset: int, include_right_bound: bool = False) -> ASTNode | None:
        return find_node_at_offset(self.root, offset, include_right_bound)


@dataclass
class DocumentStream:
    """All documents of one YAML text, in source order."""

    documents: list[Document] = field(default_factory=list)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]
