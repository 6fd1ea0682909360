"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from yamlast.models.errors import Diagnostic


class ParseRequest(BaseModel):
    """Request body for POST /parse."""

    text: str = Field(description="YAML text, possibly holding several documents")
    custom_tags: list[str] | None = Field(
        default=None,
        description='Custom tags as "<tag> [scalar|mapping|sequence]"; '
        "defaults to the server's configured tags",
    )


class DocumentResponse(BaseModel):
    """One parsed YAML document."""

    root: dict[str, Any] | None = None
    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []
    line_starts: list[int] = []


class ParseResponse(BaseModel):
    """Response body for POST /parse."""

    documents: list[DocumentResponse] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
