"""Orchestrates parsing: Schema → Load → AST → Documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from yamlast.models.document import DocumentStream
from yamlast.parser.builder import AstBuilder, create_document
from yamlast.parser.loader import DocumentLoader
from yamlast.parser.schema import TagSchema, build_schema
from yamlast.positions import get_line_start_positions

logger = logging.getLogger("yamlast.parser")


def parse(
    text: str,
    custom_tags: Iterable[str] = (),
    schema: TagSchema | None = None,
) -> DocumentStream:
    """Parse every document in ``text`` into the JSON AST.

    ``custom_tags`` are ``"<tag> [<kind>]"`` strings (kind defaults to
    ``scalar``) added to the YAML core tags. A prepared ``schema`` may be
    passed instead and is used as is.

    Malformed YAML never raises: problems are reported as errors and warnings
    on the returned documents. An invalid custom tag specification raises
    :class:`~yamlast.parser.schema.SchemaError`.
    """
    if schema is None:
        schema = build_schema(custom_tags)
    line_starts = get_line_start_positions(text)
    raw_documents = DocumentLoader(schema).load_all(text)

    builder = AstBuilder(text)
    documents = [create_document(raw, line_starts, text, builder) for raw in raw_documents]
    logger.debug(
        "Parsed %d document(s), %d error(s), %d warning(s)",
        len(documents),
        sum(len(d.errors) for d in documents),
        sum(len(d.warnings) for d in documents),
    )
    return DocumentStream(documents=documents)
