"""Batch normalizer: raw user data in, ad-platform match keys out.

``Normalizer.normalize()`` routes every field of a raw user record through
the static table in ``matchkey.core.fields``:

* always-hash fields are normalized and replaced by their SHA-256 digest;
* address fields are normalized, and hashed only when
  ``hash_address_fields`` is set;
* passthrough fields are copied unchanged.

A field that fails validation is left out of the result.  Omission is the
only rejection signal; there is no per-field error code.  ``DigestError``
from the hash primitive is not a rejection and propagates to the caller.

Safety rule: raw values are never logged, only field names.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from matchkey.core.fields import (
    ALWAYS_HASH_FIELDS,
    CONDITIONAL_HASH_FIELDS,
    PASSTHROUGH_FIELDS,
)
from matchkey.core.hashing import Sha256Digest, digest
from matchkey.core.settings import Settings, get_settings
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
from matchkey.normalization.phone_normalizer import DEFAULT_COUNTRY_CODE

logger = logging.getLogger(__name__)


def _hash_normalized(normalized: str | None) -> Sha256Digest | None:
    return digest(normalized) if normalized is not None else None


@dataclass(frozen=True, slots=True)
class Normalizer:
    """Normalizes and hashes user data for conversion APIs.

    Parameters
    ----------
    default_country_code:
        Calling code prefixed to ten-digit phone numbers when no
        per-call code is given.
    hash_address_fields:
        Hash ``city``, ``state``, ``zip_code`` and ``country`` in
        ``normalize()`` instead of returning them as normalized text.
    """

    default_country_code: str = DEFAULT_COUNTRY_CODE
    hash_address_fields: bool = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Normalizer:
        if settings is None:
            settings = get_settings()
        return cls(
            default_country_code=settings.default_country_code,
            hash_address_fields=settings.hash_address_fields,
        )

    # ------------------------------------------------------------------
    # Normalize only
    # ------------------------------------------------------------------

    def normalize_email(self, raw: object) -> str | None:
        return normalize_email(raw)

    def normalize_phone(self, raw: object, country_code: str | None = None) -> str | None:
        return normalize_phone(
            raw, country_code, default_country_code=self.default_country_code
        )

    def normalize_name(self, raw: object) -> str | None:
        return normalize_name(raw)

    def normalize_gender(self, raw: object) -> str | None:
        return normalize_gender(raw)

    def normalize_date_of_birth(self, raw: object) -> str | None:
        return normalize_date_of_birth(raw)

    def normalize_city(self, raw: object) -> str | None:
        return normalize_city(raw)

    def normalize_state(self, raw: object) -> str | None:
        return normalize_state(raw)

    def normalize_zip_code(self, raw: object) -> str | None:
        return normalize_zip_code(raw)

    def normalize_country(self, raw: object) -> str | None:
        return normalize_country(raw)

    # ------------------------------------------------------------------
    # Normalize, then hash
    # ------------------------------------------------------------------

    def hash_email(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_email(raw))

    def hash_phone(self, raw: object, country_code: str | None = None) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_phone(raw, country_code))

    def hash_name(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_name(raw))

    def hash_gender(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_gender(raw))

    def hash_date_of_birth(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_date_of_birth(raw))

    def hash_city(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_city(raw))

    def hash_state(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_state(raw))

    def hash_zip_code(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_zip_code(raw))

    def hash_country(self, raw: object) -> Sha256Digest | None:
        return _hash_normalized(self.normalize_country(raw))

    def hash_external_id(self, raw: object) -> Sha256Digest | None:
        """Hash an advertiser-side id after trimming whitespace only.

        Ids are case-sensitive and opaque, so they are neither lowercased
        nor shape-checked.
        """
        if not isinstance(raw, str) or not raw:
            return None
        return digest(raw.strip())

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    def _hashers(self) -> dict[str, Callable[[object], Sha256Digest | None]]:
        return {
            "email": self.hash_email,
            "phone": self.hash_phone,
            "first_name": self.hash_name,
            "last_name": self.hash_name,
            "gender": self.hash_gender,
            "date_of_birth": self.hash_date_of_birth,
            "external_id": self.hash_external_id,
            "city": self.hash_city,
            "state": self.hash_state,
            "zip_code": self.hash_zip_code,
            "country": self.hash_country,
        }

    def _address_normalizers(self) -> dict[str, Callable[[object], str | None]]:
        return {
            "city": self.normalize_city,
            "state": self.normalize_state,
            "zip_code": self.normalize_zip_code,
            "country": self.normalize_country,
        }

    def normalize(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Return the match-key record for one raw user record.

        Missing, empty and invalid fields are omitted from the result, as
        are keys that the routing table does not know.

        Raises
        ------
        DigestError
            When the hash backend fails for any field.
        """
        result: dict[str, Any] = {}
        if not isinstance(raw, Mapping):
            logger.debug("normalize: expected a mapping, got %s", type(raw).__name__)
            return result

        hashers = self._hashers()
        address_normalizers = self._address_normalizers()

        for field in ALWAYS_HASH_FIELDS:
            value = raw.get(field)
            if not value:
                continue
            hashed = hashers[field](value)
            if hashed is None:
                logger.debug("normalize: dropped invalid field %s", field)
                continue
            result[field] = hashed

        for field in CONDITIONAL_HASH_FIELDS:
            value = raw.get(field)
            if not value:
                continue
            if self.hash_address_fields:
                normalized = hashers[field](value)
            else:
                normalized = address_normalizers[field](value)
            if normalized is None:
                logger.debug("normalize: dropped invalid field %s", field)
                continue
            result[field] = normalized

        for field in PASSTHROUGH_FIELDS:
            value = raw.get(field)
            if value:
                result[field] = value

        return result

    def normalize_many(self, records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        """Normalize each record independently, preserving input order."""
        return [self.normalize(record) for record in records]
