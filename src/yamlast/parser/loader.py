"""YAML loader composing raw node trees with source offsets from ruamel.yaml events."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, StreamMark, YAMLError
from ruamel.yaml.events import (
    AliasEvent,
    CollectionStartEvent,
    DocumentEndEvent,
    DocumentStartEvent,
    Event,
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
)

from yamlast.parser.raw import (
    RawAnchorRef,
    RawDiagnostic,
    RawDocument,
    RawIncludeRef,
    RawMap,
    RawMapping,
    RawNode,
    RawScalar,
    RawSequence,
    key_text,
)
from yamlast.parser.schema import INCLUDE_TAG, NON_SPECIFIC_TAG, TagKind, TagSchema

logger = logging.getLogger("yamlast.parser")

DUPLICATE_KEY_REASON = "duplicate key"

_DOCUMENT_START = re.compile(r"(?:^|(?<=[\r\n]))---(?=[ \t\r\n]|\Z)")


@dataclass
class _OpenCollection:
    """A mapping or sequence whose end event has not been seen yet."""

    node: RawMap | RawSequence
    anchor: str | None
    anchor_end: int
    # Mapping state: the key waiting for its value
    has_key: bool = False
    key: RawNode | None = None
    key_start: int = 0
    keys_seen: set[str] = field(default_factory=set)


class _Composer:
    """Turns a parser event stream into :class:`RawDocument` trees.

    Anchors are scoped to their document and only become visible once the
    anchored node is complete, so an alias can never point at one of its own
    ancestors.
    """

    def __init__(self, text: str, schema: TagSchema) -> None:
        self._text = text
        self._schema = schema
        self.documents: list[RawDocument] = []
        self._document: RawDocument | None = None
        self._stack: list[_OpenCollection] = []
        self._anchors: dict[str, RawNode] = {}
        # Offset of the text slice the current event stream was parsed from
        self._base = 0

    def rebase(self, base: int) -> None:
        self._base = base

    def _offset(self, mark: StreamMark) -> int:
        return self._base + mark.index

    # -- event dispatch ------------------------------------------------------

    def feed(self, event: Event) -> None:
        match event:
            case DocumentStartEvent():
                self._start_document(self._offset(event.start_mark))
            case DocumentEndEvent():
                self._end_document(self._offset(event.end_mark))
            case ScalarEvent():
                self._scalar(event)
            case AliasEvent():
                self._alias(event)
            case SequenceStartEvent():
                start = self._offset(event.start_mark)
                self._open(RawSequence(start=start, end=start), event, TagKind.SEQUENCE)
            case MappingStartEvent():
                start = self._offset(event.start_mark)
                self._open(RawMap(start=start, end=start), event, TagKind.MAPPING)
            case SequenceEndEvent() | MappingEndEvent():
                self._close(self._offset(event.end_mark))

    def abort(self, exc: YAMLError) -> int | None:
        """Record a parser failure and keep what was composed before it.

        The failed document ends at the next ``---`` marker after the failure,
        whose offset is returned so parsing can resume there. Without one the
        document runs to the end of the text and ``None`` is returned.
        """
        if isinstance(exc, MarkedYAMLError):
            mark = exc.problem_mark or exc.context_mark
            index = self._offset(mark) if mark is not None else len(self._text)
            reason = exc.problem or exc.context or str(exc)
        else:
            position = getattr(exc, "position", None)
            index = self._base + position if position is not None else len(self._text)
            reason = str(exc)
        index = min(index, len(self._text))

        if self._document is None:
            previous_end = self.documents[-1].end if self.documents else 0
            self._start_document(min(previous_end, index))
        self._report(reason, index, _line_end(self._text, index))
        while self._stack:
            self._close(index)

        # Resume strictly after the current slice start.
        resume = _next_document_start(self._text, max(index, self._base + 1))
        self._end_document(resume if resume is not None else len(self._text))
        return resume

    # -- documents -----------------------------------------------------------

    def _start_document(self, start: int) -> None:
        self._document = RawDocument(start=start, end=start)
        self._stack = []
        self._anchors = {}

    def _end_document(self, end: int) -> None:
        document = self._require_document()
        document.end = max(end, document.start)
        self.documents.append(document)
        self._document = None

    def _require_document(self) -> RawDocument:
        if self._document is None:
            raise RuntimeError("YAML node event outside of a document")
        return self._document

    # -- nodes ---------------------------------------------------------------

    def _scalar(self, event: ScalarEvent) -> None:
        start, end = self._offset(event.start_mark), self._offset(event.end_mark)
        if _is_empty_node(event):
            self._add(None, start, end)
            return
        tag = event.tag
        node: RawNode
        if tag == INCLUDE_TAG:
            node = RawIncludeRef(start=start, end=end, value=event.value)
        else:
            node = RawScalar(
                start=start, end=end, value=event.value, plain=event.style is None, tag=tag
            )
            self._check_tag(tag, TagKind.SCALAR, start, end)
        self._define_anchor(event.anchor, node, start, end)
        self._add(node, start, end)

    def _alias(self, event: AliasEvent) -> None:
        start, end = self._offset(event.start_mark), self._offset(event.end_mark)
        name = event.anchor
        target = self._anchors.get(name)
        if target is None:
            self._report(f"found undefined alias {name!r}", start, end)
        self._add(RawAnchorRef(start=start, end=end, name=name, target=target), start, end)

    def _open(
        self, node: RawMap | RawSequence, event: CollectionStartEvent, kind: TagKind
    ) -> None:
        start, end = self._offset(event.start_mark), self._offset(event.end_mark)
        self._check_tag(event.tag, kind, start, end)
        self._stack.append(_OpenCollection(node=node, anchor=event.anchor, anchor_end=end))

    def _close(self, end: int) -> None:
        collection = self._stack[-1]
        if collection.has_key:
            # Only reachable when aborting in the middle of a mapping entry.
            self._add(None, end, end)
        self._stack.pop()
        node = collection.node
        node.end = max(end, node.start)
        self._define_anchor(collection.anchor, node, node.start, collection.anchor_end)
        self._add(node, node.start, node.end)

    def _add(self, node: RawNode | None, start: int, end: int) -> None:
        """Attach a finished node (or an empty-node marker) to its container."""
        if not self._stack:
            self._require_document().root = node
            return
        collection = self._stack[-1]
        if isinstance(collection.node, RawSequence):
            collection.node.items.append(node)
        elif not collection.has_key:
            collection.has_key = True
            collection.key = node
            collection.key_start = start
        else:
            key_end = collection.key.end if collection.key is not None else collection.key_start
            mapping = RawMapping(
                start=collection.key_start,
                end=max(end, key_end),
                key=collection.key,
                value=node,
            )
            self._check_duplicate_key(collection, mapping, key_end)
            collection.node.mappings.append(mapping)
            collection.has_key = False
            collection.key = None

    # -- checks --------------------------------------------------------------

    def _check_duplicate_key(
        self, collection: _OpenCollection, mapping: RawMapping, key_end: int
    ) -> None:
        name = key_text(mapping.key, self._text)
        if name in collection.keys_seen:
            self._report(DUPLICATE_KEY_REASON, mapping.start, key_end)
        else:
            collection.keys_seen.add(name)

    def _check_tag(self, tag: str | None, kind: TagKind, start: int, end: int) -> None:
        if tag is None or tag == NON_SPECIFIC_TAG:
            return
        expected = self._schema.lookup(tag)
        if expected is None:
            self._report(f"unknown tag !<{tag}>", start, end)
        elif expected is not kind:
            self._report(
                f'unacceptable node kind for !<{tag}> tag; it should be "{expected}", '
                f'not "{kind}"',
                start,
                end,
            )

    def _define_anchor(self, name: str | None, node: RawNode, start: int, end: int) -> None:
        """Bind an anchor name; later aliases resolve to the latest binding.

        Redefining an anchor is valid YAML and is reported as a warning only.
        """
        if name is None:
            return
        if name in self._anchors:
            self._report(f"found duplicate anchor {name!r}", start, end, is_warning=True)
        self._anchors[name] = node

    def _report(self, reason: str, start: int, end: int, is_warning: bool = False) -> None:
        self._require_document().diagnostics.append(
            RawDiagnostic(reason=reason, start=start, end=end, is_warning=is_warning)
        )


def _is_empty_node(event: ScalarEvent) -> bool:
    """True for the zero-width scalar the parser emits for an omitted node."""
    return (
        event.value == ""
        and event.style is None
        and event.tag is None
        and event.anchor is None
        and event.start_mark.index == event.end_mark.index
    )


def _line_end(text: str, index: int) -> int:
    for i in range(index, len(text)):
        if text[i] in "\r\n":
            return i
    return len(text)


def _next_document_start(text: str, index: int) -> int | None:
    """Offset of the first line-initial ``---`` marker at or after ``index``."""
    match = _DOCUMENT_START.search(text, index)
    return match.start() if match is not None else None


class DocumentLoader:
    """Loads every document of a YAML text as a raw node tree.

    Uses ruamel.yaml's pure-Python parser, which reports the character offset of
    every event. Syntax errors never escape: they are recorded on the document
    being parsed, which keeps whatever was composed before the failure. Parsing
    resumes at the next line-initial ``---`` marker, so later documents are still
    loaded.
    """

    def __init__(self, schema: TagSchema | None = None) -> None:
        self._schema = schema if schema is not None else TagSchema()

    @property
    def schema(self) -> TagSchema:
        return self._schema

    def load_all(self, text: str) -> list[RawDocument]:
        """Return one :class:`RawDocument` per ``---``-delimited document."""
        composer = _Composer(text, self._schema)
        offset: int | None = 0
        while offset is not None:
            offset = self._load_from(composer, text, offset)
        logger.debug("Loaded %d YAML document(s)", len(composer.documents))
        return composer.documents

    def _load_from(self, composer: _Composer, text: str, offset: int) -> int | None:
        """Feed the documents from ``offset`` on; return where to resume after an error."""
        yaml = YAML(typ="safe", pure=True)
        composer.rebase(offset)
        try:
            for event in yaml.parse(text[offset:]):
                composer.feed(event)
        except YAMLError as exc:
            resume = composer.abort(exc)
            logger.debug(
                "YAML syntax error, keeping partial document (resume at %s): %s", resume, exc
            )
            return resume
        return None
