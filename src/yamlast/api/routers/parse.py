"""Parse endpoint: POST /parse."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from yamlast.api.deps import get_settings
from yamlast.api.schemas import DocumentResponse, ParseRequest, ParseResponse
from yamlast.ast.visitor import to_json
from yamlast.models.document import Document
from yamlast.parser.pipeline import parse
from yamlast.parser.schema import SchemaError
from yamlast.settings import Settings

logger = logging.getLogger("yamlast.api")

router = APIRouter()


def _document_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        root=to_json(document.root) if document.root is not None else None,
        errors=document.errors,
        warnings=document.warnings,
        line_starts=document.line_starts,
    )


@router.post("", response_model=ParseResponse)
async def parse_yaml(
    body: ParseRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> ParseResponse:
    """Parse YAML text into position-annotated JSON AST documents."""
    custom_tags = body.custom_tags if body.custom_tags is not None else settings.default_custom_tags
    logger.info("parse called (text length=%d, custom tags=%d)", len(body.text), len(custom_tags))
    try:
        stream = parse(body.text, custom_tags)
    except SchemaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
    return ParseResponse(documents=[_document_response(doc) for doc in stream])
