"""yamlast: YAML to position-annotated JSON AST conversion."""

from yamlast.parser.pipeline import parse

__version__ = "0.1.0"

__all__ = ["__version__", "parse"]
