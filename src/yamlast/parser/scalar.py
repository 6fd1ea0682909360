"""Scalar typing: decide what a YAML scalar means and parse its literal."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from ruamel.yaml.nodes import ScalarNode
from ruamel.yaml.resolver import VersionedResolver

from yamlast.parser.schema import YAML_TAG_PREFIX, normalize_tag


class ScalarType(StrEnum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


# YAML 1.1 boolean spellings. The 1.2 resolver reads these as strings, but
# configuration files still use them as booleans.
YAML11_BOOLEAN_VALUES = frozenset(
    {
        "y", "Y", "yes", "Yes", "YES",
        "n", "N", "no", "No", "NO",
        "on", "On", "ON",
        "off", "Off", "OFF",
    }
)

_TRUE_VALUES = frozenset({"true", "y", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "n", "no", "off"})

_TAG_TYPES: dict[str, ScalarType] = {
    YAML_TAG_PREFIX + "null": ScalarType.NULL,
    YAML_TAG_PREFIX + "bool": ScalarType.BOOL,
    YAML_TAG_PREFIX + "int": ScalarType.INT,
    YAML_TAG_PREFIX + "float": ScalarType.FLOAT,
    YAML_TAG_PREFIX + "str": ScalarType.STRING,
}


def parse_yaml_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean {value!r}")


def _split_sign(value: str) -> tuple[int, str]:
    if value and value[0] in "+-":
        return (-1 if value[0] == "-" else 1), value[1:]
    return 1, value


def parse_yaml_integer(value: str) -> int:
    """Parse a YAML integer: decimal, ``0x`` hex, ``0o`` octal or ``0b`` binary.

    Underscores are digit separators and a leading sign is allowed.
    """
    sign, digits = _split_sign(value.replace("_", ""))
    if digits.startswith("0x"):
        return sign * int(digits[2:], 16)
    if digits.startswith("0o"):
        return sign * int(digits[2:], 8)
    if digits.startswith("0b"):
        return sign * int(digits[2:], 2)
    if not digits.isdigit():
        raise ValueError(f"Invalid integer {value!r}")
    return sign * int(digits, 10)


def parse_yaml_float(value: str) -> float:
    """Parse a YAML float, including ``.inf``/``-.inf`` and ``.nan``."""
    sign, digits = _split_sign(value.replace("_", ""))
    lowered = digits.lower()
    if lowered == ".inf":
        return sign * math.inf
    if lowered == ".nan":
        return math.nan
    return sign * float(digits)


@dataclass(frozen=True)
class ClassifiedScalar:
    type: ScalarType
    value: str | int | float | bool | None


class ScalarClassifier:
    """Classifies scalars the way a YAML 1.2 loader would, plus YAML 1.1 booleans.

    Plain scalars are typed by ruamel.yaml's 1.2 implicit resolver; quoted and
    block scalars are strings. An explicit core tag (``!!int``, ``!!str``, ...)
    takes precedence over both, including the YAML 1.1 booleans; custom tags
    do not. A literal that does not parse as the type it
    was given falls back to a string.
    """

    def __init__(self) -> None:
        self._resolver = VersionedResolver(version=(1, 2))

    def scalar_type(self, value: str, plain: bool, tag: str | None = None) -> ScalarType:
        core_type = _core_tag_type(tag)
        if core_type is not None:
            return core_type
        if not plain:
            return ScalarType.STRING
        resolved = str(self._resolver.resolve(ScalarNode, value, (True, False)))
        return _TAG_TYPES.get(resolved, ScalarType.STRING)

    def classify(self, value: str, plain: bool, tag: str | None = None) -> ClassifiedScalar:
        if plain and _core_tag_type(tag) is None and value in YAML11_BOOLEAN_VALUES:
            return ClassifiedScalar(ScalarType.BOOL, parse_yaml_boolean(value))

        scalar_type = self.scalar_type(value, plain, tag)
        try:
            return ClassifiedScalar(scalar_type, _parse_literal(scalar_type, value))
        except ValueError:
            return ClassifiedScalar(ScalarType.STRING, value)


def _core_tag_type(tag: str | None) -> ScalarType | None:
    if tag is None:
        return None
    return _TAG_TYPES.get(normalize_tag(tag))


def _parse_literal(scalar_type: ScalarType, value: str) -> str | int | float | bool | None:
    match scalar_type:
        case ScalarType.NULL:
            return None
        case ScalarType.BOOL:
            return parse_yaml_boolean(value)
        case ScalarType.INT:
            return parse_yaml_integer(value)
        case ScalarType.FLOAT:
            return parse_yaml_float(value)
        case ScalarType.STRING:
            return value
