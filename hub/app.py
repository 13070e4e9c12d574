"""
FastAPI application entry point for the hub backend.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hub.config import get_settings
from hub.dependencies import get_db_client, get_stats_sampler
from hub.middleware import RequestLoggingMiddleware
from hub.routes import router
from hub.schemas import field_errors
from models import api_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.gemini_api_key:
        api_config.DEFAULT_API_KEY = settings.gemini_api_key
    # Fail at startup, not on the first request, if the database is unreachable.
    get_db_client()
    sampler = get_stats_sampler() if settings.stats_sampler_enabled else None
    if sampler:
        sampler.start()
    try:
        yield
    finally:
        if sampler:
            sampler.stop()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": "Validation failed", "errors": field_errors(exc.errors())},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title="OSRS Gaming Hub API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestLoggingMiddleware, path_prefix=settings.api_prefix)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
