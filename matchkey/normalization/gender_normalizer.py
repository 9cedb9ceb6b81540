"""Gender normalizer: maps the accepted spellings to ``m`` / ``f``."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_GENDER_CODES: dict[str, str] = {
    "m": "m",
    "male": "m",
    "f": "f",
    "female": "f",
}


def normalize_gender(raw: object) -> str | None:
    """Return ``"m"`` or ``"f"`` for a recognised value, else ``None``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if not isinstance(raw, str) or not raw:
        return None

    code = _GENDER_CODES.get(raw.strip().lower())
    if code is None:
        logger.debug("normalize_gender: unrecognised value (length=%d)", len(raw))
    return code
