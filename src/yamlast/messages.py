"""User-facing message lookup."""

from __future__ import annotations

import gettext
from functools import cache

DOMAIN = "yamlast"

INVALID_SYMBOL = "Invalid symbol"


@cache
def _translations() -> gettext.NullTranslations:
    return gettext.translation(DOMAIN, fallback=True)


def localize(key: str, default: str) -> str:
    """Resolve ``key`` to a localized message, falling back to ``default``.

    Catalogs are keyed by the message key; without an installed catalog the
    default English text is returned.
    """
    translated = _translations().gettext(key)
    return default if translated == key else translated
