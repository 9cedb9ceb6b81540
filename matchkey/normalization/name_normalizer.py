"""Name normalizer for first and last names.

Lowercases, strips and collapses internal whitespace.  Honorifics,
punctuation and diacritics are left untouched; platforms hash names in
this minimal form.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def normalize_name(raw: object) -> str | None:
    """Return *raw* lowercased with single spaces, or ``None`` if empty."""
    if not isinstance(raw, str) or not raw:
        return None

    normalized = " ".join(raw.lower().split())

    if not normalized:
        logger.debug("normalize_name: whitespace-only input (length=%d)", len(raw))
        return None

    return normalized
