"""FastAPI application object.

Assembles the health and normalize routers and maps digest failures to
HTTP 500.  This module is the authoritative app object — matchkey/main.py
re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from matchkey.api.routes.health import router as health_router
from matchkey.api.routes.normalize import router as normalize_router
from matchkey.core.hashing import DigestError
from matchkey.core.logging import setup_logging
from matchkey.core.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)


@app.exception_handler(DigestError)
async def digest_error_handler(request: Request, exc: DigestError) -> JSONResponse:
    # SAFETY: the exception message never carries the hashed value
    logger.error("digest failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "digest computation failed"})


app.include_router(health_router)
app.include_router(normalize_router)
