"""Tag registry: YAML core tags plus caller-supplied custom tags."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

YAML_TAG_PREFIX = "tag:yaml.org,2002:"
INCLUDE_TAG = "!include"
NON_SPECIFIC_TAG = "!"


class TagKind(StrEnum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


class SchemaError(ValueError):
    """Raised when a custom tag specification cannot be registered."""


_CORE_TAGS: dict[str, TagKind] = {
    **{
        YAML_TAG_PREFIX + name: TagKind.SCALAR
        for name in (
            "str", "int", "float", "bool", "null", "binary", "timestamp", "merge", "value",
        )
    },
    YAML_TAG_PREFIX + "map": TagKind.MAPPING,
    YAML_TAG_PREFIX + "set": TagKind.MAPPING,
    YAML_TAG_PREFIX + "seq": TagKind.SEQUENCE,
    YAML_TAG_PREFIX + "omap": TagKind.SEQUENCE,
    YAML_TAG_PREFIX + "pairs": TagKind.SEQUENCE,
    INCLUDE_TAG: TagKind.SCALAR,
}


@dataclass(frozen=True)
class CustomTag:
    """A custom tag and the YAML node kind it applies to."""

    name: str
    kind: TagKind = TagKind.SCALAR


def normalize_tag(tag: str) -> str:
    """Expand the secondary handle, so ``!!int`` and ``tag:yaml.org,2002:int`` match."""
    if tag.startswith("!!"):
        return YAML_TAG_PREFIX + tag[2:]
    return tag


def parse_tag_spec(spec: str) -> CustomTag:
    """Parse ``"<tag> [<kind>]"``, e.g. ``"!Ref scalar"`` or ``"!If sequence"``."""
    parts = spec.split()
    if not parts:
        raise SchemaError("Empty custom tag specification")
    if len(parts) > 2:
        raise SchemaError(f"Invalid custom tag specification '{spec}'")
    kind = parts[1] if len(parts) == 2 else TagKind.SCALAR
    try:
        return CustomTag(name=parts[0], kind=TagKind(kind))
    except ValueError:
        allowed = ", ".join(k.value for k in TagKind)
        raise SchemaError(
            f"Unknown kind '{kind}' for custom tag '{parts[0]}'. Expected one of: {allowed}"
        ) from None


@dataclass
class TagSchema:
    """Tags the loader accepts, keyed by their resolved tag string.

    Core tags are always known. Custom tags are added with :meth:`register` and
    become resolvable immediately; registering a tag again replaces its kind.
    """

    _custom: dict[str, TagKind] = field(default_factory=dict)

    def register(self, name: str, kind: TagKind | str = TagKind.SCALAR) -> None:
        try:
            self._custom[normalize_tag(name)] = TagKind(kind)
        except ValueError:
            raise SchemaError(f"Unknown kind '{kind}' for custom tag '{name}'") from None

    def lookup(self, tag: str) -> TagKind | None:
        """Return the node kind ``tag`` binds to, or ``None`` for unknown tags."""
        tag = normalize_tag(tag)
        if tag in self._custom:
            return self._custom[tag]
        return _CORE_TAGS.get(tag)

    @property
    def custom_tags(self) -> list[CustomTag]:
        return [CustomTag(name=name, kind=kind) for name, kind in self._custom.items()]


def build_schema(custom_tags: Iterable[str] = ()) -> TagSchema:
    """Build a schema from ``"<tag> [<kind>]"`` strings, in order."""
    schema = TagSchema()
    for spec in custom_tags:
        tag = parse_tag_spec(spec)
        schema.register(tag.name, tag.kind)
    return schema
