"""Static routing table for user-data fields.

Every field the batch normalizer recognises belongs to exactly one class:

ALWAYS_HASH      : contact PII, always sent as a SHA-256 digest
CONDITIONAL_HASH : address components, hashed only when
                   ``hash_address_fields`` is enabled
PASSTHROUGH      : tracking ids and free-form traits, copied verbatim

Fields outside the table are ignored by the batch normalizer.
"""
from __future__ import annotations

from enum import Enum


class FieldClass(str, Enum):
    ALWAYS_HASH = "always_hash"
    CONDITIONAL_HASH = "conditional_hash"
    PASSTHROUGH = "passthrough"


# Tuples fix the processing order; it is not part of the output contract.
ALWAYS_HASH_FIELDS: tuple[str, ...] = (
    "email",
    "phone",
    "first_name",
    "last_name",
    "gender",
    "date_of_birth",
    "external_id",
)

CONDITIONAL_HASH_FIELDS: tuple[str, ...] = (
    "city",
    "state",
    "zip_code",
    "country",
)

PASSTHROUGH_FIELDS: tuple[str, ...] = (
    "ip_address",
    "user_agent",
    "subscription_id",
    "lead_id",
    "anonymous_id",
    "traits",
)

FIELD_CLASSES: dict[FieldClass, tuple[str, ...]] = {
    FieldClass.ALWAYS_HASH: ALWAYS_HASH_FIELDS,
    FieldClass.CONDITIONAL_HASH: CONDITIONAL_HASH_FIELDS,
    FieldClass.PASSTHROUGH: PASSTHROUGH_FIELDS,
}

_CLASS_BY_FIELD: dict[str, FieldClass] = {
    name: field_class
    for field_class, names in FIELD_CLASSES.items()
    for name in names
}


def classify(field_name: str) -> FieldClass | None:
    """Return the class of *field_name*, or ``None`` for unknown fields."""
    return _CLASS_BY_FIELD.get(field_name)


def fields_of(field_class: FieldClass) -> tuple[str, ...]:
    """Return the field names belonging to *field_class*, in processing order."""
    return FIELD_CLASSES[field_class]


def known_fields() -> frozenset[str]:
    return frozenset(_CLASS_BY_FIELD)
