"""Build the JSON AST from raw YAML node trees."""

from __future__ import annotations

from typing import assert_never

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
from yamlast.messages import INVALID_SYMBOL, localize
from yamlast.models.document import Document
from yamlast.models.errors import Diagnostic, ErrorCode, Location
from yamlast.parser.diagnostics import filter_diagnostics
from yamlast.parser.raw import (
    RawAnchorRef,
    RawDocument,
    RawIncludeRef,
    RawMap,
    RawMapping,
    RawNode,
    RawScalar,
    RawSequence,
    key_text,
)
from yamlast.parser.scalar import ScalarClassifier, ScalarType


class AstBuilder:
    """Converts raw nodes into AST nodes, parents before children.

    ``text`` is the source the raw tree was loaded from; it supplies the string
    form of mapping keys that are not scalars.
    """

    def __init__(self, text: str, classifier: ScalarClassifier | None = None) -> None:
        self._text = text
        self._classifier = classifier if classifier is not None else ScalarClassifier()

    def build(self, node: RawNode | None, parent: ASTNode | None = None) -> ASTNode | None:
        if node is None:
            return None

        match node:
            case RawMap():
                obj = ObjectNode(parent, node.start, node.end - node.start)
                for mapping in node.mappings:
                    obj.properties.append(self._build_property(mapping, obj))
                return obj
            case RawMapping():
                return self._build_property(node, parent)
            case RawSequence():
                return self._build_array(node, parent)
            case RawScalar():
                return self._build_scalar(node, parent)
            case RawAnchorRef():
                return self.build(node.target, parent) or NullNode(
                    parent, node.start, node.end - node.start
                )
            case RawIncludeRef():
                return StringNode(parent, node.start, node.end - node.start, node.value)
            case _:
                assert_never(node)

    def _build_property(self, mapping: RawMapping, parent: ASTNode | None) -> PropertyNode:
        key = mapping.key
        key_start = key.start if key is not None else mapping.start
        prop = PropertyNode(parent, key_start, mapping.end - key_start)

        # Keys may be arbitrary YAML nodes; they are always reduced to a string.
        key_length = key.end - key.start if key is not None else 0
        prop.key_node = StringNode(prop, key_start, key_length, key_text(key, self._text))

        value = self.build(mapping.value, prop)
        if value is None:
            value = NullNode(prop, mapping.start, mapping.end - mapping.start)
        prop.value_node = value
        return prop

    def _build_array(self, sequence: RawSequence, parent: ASTNode | None) -> ArrayNode:
        array = ArrayNode(parent, sequence.start, sequence.end - sequence.start)
        last = len(sequence.items) - 1
        for index, item in enumerate(sequence.items):
            if item is None and index == last:
                # Trailing empty entry: dropped, flow and block alike.
                break
            if item is None:
                # Empty entries have no span of their own.
                array.items.append(NullNode(array, sequence.start, sequence.end - sequence.start))
                continue
            built = self.build(item, array)
            if built is not None:
                array.items.append(built)
        return array

    def _build_scalar(self, scalar: RawScalar, parent: ASTNode | None) -> ASTNode:
        offset, length = scalar.start, scalar.end - scalar.start
        classified = self._classifier.classify(scalar.value, scalar.plain, scalar.tag)
        match classified.type:
            case ScalarType.NULL:
                return NullNode(parent, offset, length)
            case ScalarType.BOOL:
                return BooleanNode(parent, offset, length, classified.value)
            case ScalarType.INT:
                return NumberNode(parent, offset, length, classified.value, is_integer=True)
            case ScalarType.FLOAT:
                return NumberNode(parent, offset, length, classified.value, is_integer=False)
            case ScalarType.STRING:
                return StringNode(parent, offset, length, classified.value)


def create_document(
    raw_document: RawDocument,
    line_starts: list[int],
    text: str,
    builder: AstBuilder | None = None,
) -> Document:
    """Build one :class:`Document` from a raw document tree and its diagnostics."""
    if builder is None:
        builder = AstBuilder(text)
    document = Document(line_starts=line_starts)
    document.root = builder.build(raw_document.root)

    if document.root is None:
        document.errors.append(
            Diagnostic(
                message=localize(INVALID_SYMBOL, "Expected a YAML object, array or literal"),
                location=Location(start=raw_document.start, end=raw_document.end),
                code=ErrorCode.UNDEFINED,
            )
        )

    errors, warnings = filter_diagnostics(raw_document.diagnostics, text)
    document.errors.extend(errors)
    document.warnings.extend(warnings)
    return document
