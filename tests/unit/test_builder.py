"""Tests for building the JSON AST from raw node trees."""

from __future__ import annotations

from yamlast.ast.nodes import (
    ArrayNode,
    BooleanNode,
    NullNode,
    NumberNode,
    ObjectNode,
    PropertyNode,
    StringNode,
)
from yamlast.parser.builder import AstBuilder, create_document
from yamlast.parser.raw import (
    RawAnchorRef,
    RawDiagnostic,
    RawDocument,
    RawIncludeRef,
    RawMap,
    RawMapping,
    RawScalar,
    RawSequence,
)


class TestAstBuilder:
    def test_none_builds_nothing(self) -> None:
        assert AstBuilder("").build(None) is None

    def test_map_to_object(self) -> None:
        text = "a: 1\nb: on\n"
        raw = RawMap(
            start=0,
            end=11,
            mappings=[
                RawMapping(0, 4, RawScalar(0, 1, "a"), RawScalar(3, 4, "1")),
                RawMapping(5, 10, RawScalar(5, 6, "b"), RawScalar(8, 10, "on")),
            ],
        )
        obj = AstBuilder(text).build(raw)
        assert isinstance(obj, ObjectNode)
        assert (obj.offset, obj.length) == (0, 11)
        assert obj.parent is None
        first, second = obj.properties
        assert first.parent is obj
        assert first.key_node.value == "a"
        assert first.key_node.parent is first
        assert isinstance(first.value_node, NumberNode)
        assert first.value_node.value == 1
        assert first.value_node.parent is first
        assert isinstance(second.value_node, BooleanNode)
        assert second.value_node.value is True
        assert (second.offset, second.length) == (5, 5)

    def test_omitted_value_spans_mapping(self) -> None:
        raw = RawMap(0, 3, [RawMapping(0, 2, RawScalar(0, 1, "a"), None)])
        obj = AstBuilder("a:\n").build(raw)
        prop = obj.properties[0]
        assert isinstance(prop.value_node, NullNode)
        assert (prop.value_node.offset, prop.value_node.length) == (0, 2)
        assert prop.value_node.parent is prop

    def test_omitted_key_is_empty_string(self) -> None:
        raw = RawMap(0, 5, [RawMapping(2, 5, None, RawScalar(4, 5, "x"))])
        prop = AstBuilder(": x\n").build(raw).properties[0]
        assert isinstance(prop.key_node, StringNode)
        assert prop.key_node.value == ""
        assert (prop.key_node.offset, prop.key_node.length) == (2, 0)

    def test_collection_key_uses_source_text(self) -> None:
        text = "? [a, b]\n: 1\n"
        key = RawSequence(2, 8, [RawScalar(3, 4, "a"), RawScalar(6, 7, "b")])
        raw = RawMap(0, 13, [RawMapping(2, 12, key, RawScalar(11, 12, "1"))])
        prop = AstBuilder(text).build(raw).properties[0]
        assert prop.key_node.value == "[a, b]"
        assert (prop.key_node.offset, prop.key_node.length) == (2, 6)

    def test_alias_key_uses_target_value(self) -> None:
        target = RawScalar(3, 4, "k")
        key = RawAnchorRef(8, 10, "x", target)
        raw = RawMap(0, 20, [RawMapping(8, 14, key, RawScalar(12, 14, "v"))])
        prop = AstBuilder(" " * 20).build(raw).properties[0]
        assert prop.key_node.value == "k"

    def test_mapping_builds_property(self) -> None:
        mapping = RawMapping(0, 4, RawScalar(0, 1, "a"), RawScalar(3, 4, "x"))
        prop = AstBuilder("a: x").build(mapping)
        assert isinstance(prop, PropertyNode)
        assert prop.value_node.value == "x"

    def test_trailing_empty_item_dropped(self) -> None:
        raw = RawSequence(0, 8, [RawScalar(2, 3, "1"), None])
        array = AstBuilder("- 1\n-\n").build(raw)
        assert isinstance(array, ArrayNode)
        assert len(array.items) == 1

    def test_inner_empty_item_spans_sequence(self) -> None:
        raw = RawSequence(0, 12, [RawScalar(2, 3, "1"), None, RawScalar(8, 9, "2")])
        array = AstBuilder("- 1\n-\n- 2\n").build(raw)
        assert [item.type.value for item in array.items] == ["number", "null", "number"]
        null = array.items[1]
        assert (null.offset, null.length) == (0, 12)
        assert null.parent is array

    def test_unresolved_alias_is_null_at_reference(self) -> None:
        ref = RawAnchorRef(3, 5, "x")
        node = AstBuilder("a: *x\n").build(ref)
        assert isinstance(node, NullNode)
        assert (node.offset, node.length) == (3, 2)

    def test_alias_builds_target_copy(self) -> None:
        target = RawScalar(6, 7, "1")
        node = AstBuilder("a: &x 1\nb: *x\n").build(RawAnchorRef(11, 13, "x", target))
        assert isinstance(node, NumberNode)
        assert node.value == 1
        assert (node.offset, node.length) == (6, 1)

    def test_include_is_string(self) -> None:
        node = AstBuilder("").build(RawIncludeRef(6, 24, "other.yaml"))
        assert isinstance(node, StringNode)
        assert node.value == "other.yaml"
        assert (node.offset, node.length) == (6, 18)

    def test_scalar_kinds(self) -> None:
        builder = AstBuilder("")
        assert isinstance(builder.build(RawScalar(0, 1, "~")), NullNode)
        integer = builder.build(RawScalar(0, 4, "0x1A"))
        assert integer.value == 26 and integer.is_integer
        real = builder.build(RawScalar(0, 4, "3.14"))
        assert real.value == 3.14 and not real.is_integer
        quoted = builder.build(RawScalar(0, 5, "yes", plain=False))
        assert isinstance(quoted, StringNode) and quoted.value == "yes"


class TestCreateDocument:
    def test_missing_root_is_first_error(self) -> None:
        raw = RawDocument(
            start=0,
            end=4,
            diagnostics=[RawDiagnostic("unknown tag !<!x>", 1, 3)],
        )
        document = create_document(raw, [0], "---\n")
        assert document.root is None
        assert [e.message for e in document.errors] == [
            "Expected a YAML object, array or literal",
            "unknown tag !<!x>",
        ]
        assert (document.errors[0].location.start, document.errors[0].location.end) == (0, 4)

    def test_diagnostics_split(self) -> None:
        text = "a: 1\na: 2\n"
        raw = RawDocument(
            start=0,
            end=10,
            root=RawScalar(0, 1, "a"),
            diagnostics=[RawDiagnostic("duplicate key", 5, 6)],
        )
        document = create_document(raw, [0, 5, 10], text)
        assert document.errors == []
        assert [w.message for w in document.warnings] == ["duplicate key"]
        assert document.line_starts == [0, 5, 10]
