"""Phone number normalizer.

Converts a phone string to an E.164-style string (``+15551234567``) by
keeping digits only.  This is a shape check, not a numbering-plan check:
any run of ten or more digits is accepted.

Country-code rules
------------------
* An input with more than ten digits is assumed to carry its own country
  code (with or without a leading ``+``) and is kept as-is.
* An input with exactly ten digits is a national number; the explicit
  *country_code* argument, or else *default_country_code*, is prefixed.
* Fewer than ten digits is rejected.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_CODE = "1"

_NATIONAL_LENGTH = 10
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def normalize_phone(
    raw: object,
    country_code: str | None = None,
    *,
    default_country_code: str = DEFAULT_COUNTRY_CODE,
) -> str | None:
    """Return *raw* as ``+<digits>``, or ``None`` if it has too few digits.

    Parameters
    ----------
    raw:
        Raw phone value; separators, spaces and a leading ``+`` are allowed.
    country_code:
        Calling code (``"44"`` or ``"+44"``) prefixed to ten-digit
        national numbers.  Overrides *default_country_code* for this call.
    default_country_code:
        Calling code used when *country_code* is not given.

    Returns
    -------
    str | None
        ``"+"`` followed by the digits, or ``None`` when *raw* is not a
        string, is empty, or has fewer than ten digits.
    """
    if not isinstance(raw, str) or not raw:
        return None

    code = country_code if country_code is not None else default_country_code
    code = code.removeprefix("+")
    digits = _NON_DIGIT_RE.sub("", raw)

    if len(digits) < _NATIONAL_LENGTH:
        logger.debug("normalize_phone: too few digits (count=%d)", len(digits))
        return None

    if len(digits) == _NATIONAL_LENGTH:
        digits = code + digits

    return "+" + digits
