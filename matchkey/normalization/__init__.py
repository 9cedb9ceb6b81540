"""Normalization package.

One normalizer per PII field family.  Each normalizer takes a raw value
and returns the canonical string that is hashed (or sent as-is) as an
ad-platform match key.

All normalizers follow the same contract::

    def normalize_<field>(raw: object) -> str | None:
        ...

``None`` means the value was rejected: missing, not a string, or the
wrong shape.  Normalizers never raise and never log raw values.
"""
from matchkey.normalization.address_normalizer import (
    normalize_city,
    normalize_country,
    normalize_state,
    normalize_zip_code,
)
from matchkey.normalization.date_normalizer import normalize_date_of_birth
from matchkey.normalization.email_normalizer import normalize_email
from matchkey.normalization.gender_normalizer import normalize_gender
from matchkey.normalization.name_normalizer import normalize_name
from matchkey.normalization.phone_normalizer import normalize_phone

__all__ = [
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
