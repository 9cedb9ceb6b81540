"""Request and response bodies for the normalize routes."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawUserData(BaseModel):
    """Unhashed user data.  Every field is optional; unknown keys are dropped.

    Values are left untyped: a malformed value is dropped by the normalizer
    for that field alone instead of failing the whole request.
    """

    model_config = ConfigDict(extra="ignore")

    # Hashed
    email: Any = None
    phone: Any = None
    first_name: Any = None
    last_name: Any = None
    gender: Any = None
    date_of_birth: Any = None
    external_id: Any = None

    # Normalized; hashed only when hash_address_fields is on
    city: Any = None
    state: Any = None
    zip_code: Any = None
    country: Any = None

    # Never hashed
    ip_address: Any = None
    user_agent: Any = None
    subscription_id: Any = None
    lead_id: Any = None
    anonymous_id: Any = None
    traits: Any = None


class NormalizeBatchRequest(BaseModel):
    records: list[RawUserData] = Field(default_factory=list)


class NormalizeBatchResponse(BaseModel):
    records: list[dict[str, Any]]
