"""Split loader diagnostics into errors and warnings."""

from __future__ import annotations

from collections.abc import Iterable

from yamlast.models.errors import Diagnostic, ErrorCode, Location
from yamlast.parser.loader import DUPLICATE_KEY_REASON
from yamlast.parser.raw import RawDiagnostic

MERGE_KEY = "<<"


def convert_diagnostic(raw: RawDiagnostic) -> Diagnostic:
    return Diagnostic(
        message=raw.reason,
        location=Location(start=raw.start, end=raw.end),
        code=ErrorCode.UNDEFINED,
    )


def is_merge_key_duplicate(raw: RawDiagnostic, text: str) -> bool:
    """True when a duplicate-key report points at a ``<<`` merge key.

    Merge keys are repeated on purpose in mappings that merge several anchors.
    """
    return raw.reason == DUPLICATE_KEY_REASON and text[raw.start : raw.end].startswith(MERGE_KEY)


def filter_diagnostics(
    diagnostics: Iterable[RawDiagnostic], text: str
) -> tuple[list[Diagnostic], list[Diagnostic]]:
    """Return ``(errors, warnings)`` for one document's raw diagnostics.

    Merge-key duplicates are dropped, other duplicate keys and anything the
    loader flagged as a warning become warnings, and the rest are errors.
    """
    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []
    for raw in diagnostics:
        if is_merge_key_duplicate(raw, text):
            continue
        if raw.reason == DUPLICATE_KEY_REASON or raw.is_warning:
            warnings.append(convert_diagnostic(raw))
        else:
            errors.append(convert_diagnostic(raw))
    return errors, warnings
