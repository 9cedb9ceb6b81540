"""Address component normalizers: city, state, zip code and country.

Each component is normalized on its own; there is no free-text address
parsing and no per-country rule set.

* ``city`` / ``state``: lowercased and stripped; state names and
  abbreviations are kept as given (``"california"`` stays ``"california"``).
* ``zip_code``: lowercased with every whitespace character removed, so
  ``"SW1A 1AA"`` becomes ``"sw1a1aa"``.
* ``country``: lowercased ISO-3166-1 alpha-2 code; anything that is not
  exactly two characters long is rejected.  The code is not checked
  against the ISO list.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_COUNTRY_CODE_LENGTH = 2


def _lower_strip(raw: object) -> str | None:
    if not isinstance(raw, str) or not raw:
        return None
    normalized = raw.strip().lower()
    return normalized or None


def normalize_city(raw: object) -> str | None:
    """Return *raw* lowercased and stripped, or ``None`` if empty."""
    return _lower_strip(raw)


def normalize_state(raw: object) -> str | None:
    """Return *raw* lowercased and stripped, or ``None`` if empty."""
    return _lower_strip(raw)


def normalize_zip_code(raw: object) -> str | None:
    """Return *raw* lowercased with all whitespace removed, or ``None``."""
    normalized = _lower_strip(raw)
    if normalized is None:
        return None
    return "".join(normalized.split())


def normalize_country(raw: object) -> str | None:
    """Return *raw* as a lowercase two-letter code, or ``None``."""
    normalized = _lower_strip(raw)
    if normalized is None:
        return None

    if len(normalized) != _COUNTRY_CODE_LENGTH:
        logger.debug("normalize_country: expected 2 characters (length=%d)", len(normalized))
        return None

    return normalized
