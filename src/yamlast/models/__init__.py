"""Document and diagnostic models."""

from yamlast.models.document import Document, DocumentStream
from yamlast.models.errors import Diagnostic, ErrorCode, Location, Position

__all__ = [
    "Diagnostic",
    "Document",
    "DocumentStream",
    "ErrorCode",
    "Location",
    "Position",
]
