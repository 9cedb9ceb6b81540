"""Date-of-birth normalizer.

Produces the ``YYYYMMDD`` shape expected by ad platforms by removing
``-``, ``/`` and ``.`` separators and requiring exactly eight digits.

This is a format check only.  The digits are not parsed as a calendar
date and field order is not inspected, so ``"01/15/1990"`` yields
``"01151990"`` rather than being rejected or reordered.  Callers holding
US-style dates must reorder them before normalizing.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[-/.]")
_EIGHT_DIGITS_RE = re.compile(r"[0-9]{8}")


def normalize_date_of_birth(raw: object) -> str | None:
    """Return *raw* without separators if it is exactly eight digits.

    Returns ``None`` for non-strings, empty input and any other shape
    (surrounding whitespace included).
    """
    if not isinstance(raw, str) or not raw:
        return None

    cleaned = _SEPARATOR_RE.sub("", raw)

    if _EIGHT_DIGITS_RE.fullmatch(cleaned) is None:
        logger.debug("normalize_date_of_birth: not eight digits (length=%d)", len(cleaned))
        return None

    return cleaned
