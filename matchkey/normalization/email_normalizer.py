"""Email normalizer.

Converts a raw email address to its lowercase, whitespace-stripped
canonical form.  No provider-specific rewriting (Gmail dots, ``+tag``
sub-addresses) is applied: ad platforms hash the address exactly as the
user typed it, modulo case and surrounding whitespace.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Shortest address accepted, e.g. "a@b.c"
_MIN_LENGTH = 5


def normalize_email(raw: object) -> str | None:
    """Return *raw* email address in canonical lowercase form, or ``None``.

    Parameters
    ----------
    raw:
        Raw email value from the caller's user record.

    Returns
    -------
    str | None
        Lowercased, whitespace-stripped address.  ``None`` when *raw* is
        not a string, is empty, has no ``@`` or is shorter than five
        characters after stripping.
    """
    if not isinstance(raw, str) or not raw:
        return None

    normalized = raw.strip().lower()

    if "@" not in normalized or len(normalized) < _MIN_LENGTH:
        logger.debug("normalize_email: rejected (length=%d)", len(normalized))
        return None

    return normalized
