"""POST /normalize — hash a raw user record into match keys.

Endpoints
---------
POST /normalize        : one record in, one match-key record out
POST /normalize/batch  : ``{"records": [...]}`` in, same order out

Both accept an optional ``hash_address_fields`` query parameter that
overrides the configured default for the request.

Safety rule: request bodies are never logged.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from matchkey.api.deps import get_normalizer
from matchkey.api.schemas import NormalizeBatchRequest, NormalizeBatchResponse, RawUserData
from matchkey.normalizer import Normalizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/normalize", tags=["normalize"])


def _with_override(normalizer: Normalizer, hash_address_fields: bool | None) -> Normalizer:
    if hash_address_fields is None:
        return normalizer
    return dataclasses.replace(normalizer, hash_address_fields=hash_address_fields)


@router.post("", summary="Normalize and hash one user record")
def normalize_record(
    body: RawUserData,
    hash_address_fields: bool | None = Query(default=None),
    normalizer: Normalizer = Depends(get_normalizer),
) -> dict[str, Any]:
    normalizer = _with_override(normalizer, hash_address_fields)
    result = normalizer.normalize(body.model_dump(exclude_none=True))
    logger.info("normalize: %d field(s) in, %d out", len(body.model_fields_set), len(result))
    return result


@router.post("/batch", response_model=NormalizeBatchResponse, summary="Normalize many records")
def normalize_batch(
    body: NormalizeBatchRequest,
    hash_address_fields: bool | None = Query(default=None),
    normalizer: Normalizer = Depends(get_normalizer),
) -> NormalizeBatchResponse:
    normalizer = _with_override(normalizer, hash_address_fields)
    records = normalizer.normalize_many(r.model_dump(exclude_none=True) for r in body.records)
    logger.info("normalize_batch: %d record(s)", len(records))
    return NormalizeBatchResponse(records=records)
