"""SHA-256 digest primitive for match keys.

Ad-platform conversion APIs accept PII only as the SHA-256 hex digest of
the *normalized* value, so every caller must normalize before hashing.

``digest`` is the single place the hash backend is touched.  Failures of
the backend itself raise ``DigestError``; they are never reported as a
``None`` result, which is reserved for validation rejections upstream.
"""
from __future__ import annotations

import hashlib
import re
from typing import NewType

Sha256Digest = NewType("Sha256Digest", str)

_DIGEST_RE = re.compile(r"[0-9a-f]{64}")


class DigestError(RuntimeError):
    """The digest facility failed to produce a hash for a value."""


def digest(value: str) -> Sha256Digest:
    """Return the SHA-256 of *value* (UTF-8) as 64 lowercase hex characters.

    Raises
    ------
    DigestError
        When *value* cannot be UTF-8 encoded (lone surrogates) or the
        ``sha256`` backend is unavailable, e.g. disabled by a FIPS policy.
    """
    try:
        payload = value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DigestError("value cannot be encoded as UTF-8") from exc

    try:
        hasher = hashlib.new("sha256", payload)
    except ValueError as exc:
        raise DigestError("sha256 backend unavailable") from exc

    return Sha256Digest(hasher.hexdigest())


def is_digest(value: object) -> bool:
    """Return True if *value* has the shape of a ``digest()`` result.

    Shape check only: 64 characters from ``[0-9a-f]``.
    """
    return isinstance(value, str) and _DIGEST_RE.fullmatch(value) is not None
