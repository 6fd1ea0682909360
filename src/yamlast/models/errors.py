"""Structured diagnostic models with source offsets."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ErrorCode(StrEnum):
    UNDEFINED = "undefined"


class Location(BaseModel):
    """Half-open ``[start, end)`` character range in the source text."""

    start: int
    end: int


class Position(BaseModel):
    """Zero-based line/character position, as used by editor tooling."""

    line: int
    character: int


class Diagnostic(BaseModel):
    """An error or warning attached to a parsed document."""

    message: str
    location: Location
    code: ErrorCode = ErrorCode.UNDEFINED
