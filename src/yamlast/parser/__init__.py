"""YAML parsing with source offsets for yamlast."""

from yamlast.parser.builder import AstBuilder, create_document
from yamlast.parser.diagnostics import filter_diagnostics
from yamlast.parser.loader import DocumentLoader
from yamlast.parser.pipeline import parse
from yamlast.parser.scalar import ScalarClassifier, ScalarType
from yamlast.parser.schema import CustomTag, SchemaError, TagKind, TagSchema, build_schema

__all__ = [
    "AstBuilder",
    "CustomTag",
    "DocumentLoader",
    "ScalarClassifier",
    "ScalarType",
    "SchemaError",
    "TagKind",
    "TagSchema",
    "build_schema",
    "create_document",
    "filter_diagnostics",
    "parse",
]
