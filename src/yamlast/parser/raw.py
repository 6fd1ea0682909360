"""Raw YAML node tree composed from parser events.

This is the loader's output: a faithful, untyped view of the YAML structure
with character offsets, before scalars are classified or the tree is reshaped
into the JSON AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class RawMap:
    start: int
    end: int
    mappings: list[RawMapping] = field(default_factory=list)


@dataclass(eq=False)
class RawMapping:
    """A key/value pair; either side is ``None`` when omitted in the source."""

    start: int
    end: int
    key: RawNode | None = None
    value: RawNode | None = None


@dataclass(eq=False)
class RawSequence:
    start: int
    end: int
    # None marks an entry the parser reported as empty
    items: list[RawNode | None] = field(default_factory=list)


@dataclass(eq=False)
class RawScalar:
    start: int
    end: int
    value: str
    plain: bool = True
    tag: str | None = None


@dataclass(eq=False)
class RawAnchorRef:
    """An alias (``*name``); ``target`` is the anchored node, if it resolved."""

    start: int
    end: int
    name: str
    target: RawNode | None = None


@dataclass(eq=False)
class RawIncludeRef:
    start: int
    end: int
    value: str


RawNode = RawMap | RawMapping | RawSequence | RawScalar | RawAnchorRef | RawIncludeRef


@dataclass(frozen=True)
class RawDiagnostic:
    """A problem reported while loading one document."""

    reason: str
    start: int
    end: int
    is_warning: bool = False


@dataclass
class RawDocument:
    start: int
    end: int
    root: RawNode | None = None
    diagnostics: list[RawDiagnostic] = field(default_factory=list)


def key_text(node: RawNode | None, text: str) -> str:
    """Return the string a mapping key is known by.

    Scalar and include keys use their value, aliases the text of what they
    point to, and collection keys their source text.
    """
    match node:
        case None:
            return ""
        case RawScalar(value=value) | RawIncludeRef(value=value):
            return value
        case RawAnchorRef(target=target) if target is not None:
            return key_text(target, text)
        case _:
            return text[node.start : node.end]
