"""PII normalization and SHA-256 match keys for ad-platform conversion APIs.

Example::

    from matchkey import Normalizer

    normalizer = Normalizer()
    normalizer.normalize({"email": "JOHN@EXAMPLE.COM", "phone": "555-123-4567"})
    normalizer.hash_email("john@example.com")
"""
from matchkey.core.fields import FieldClass
from matchkey.core.hashing import DigestError, Sha256Digest, digest, is_digest
from matchkey.normalization import (
    normalize_city,
    normalize_country,
    normalize_date_of_birth,
    normalize_email,
    normalize_gender,
    normalize_name,
    normalize_phone,
    normalize_state,
    normalize_zip_code,
)
from matchkey.normalizer import Normalizer

__all__ = [
    "DigestError",
    "FieldClass",
    "Normalizer",
    "Sha256Digest",
    "digest",
    "is_digest",
    "normalize_city",
    "normalize_country",
    "normalize_date_of_birth",
    "normalize_email",
    "normalize_gender",
    "normalize_name",
    "normalize_phone",
    "normalize_state",
    "normalize_zip_code",
]
