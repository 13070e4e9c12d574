"""
Request logging middleware: one line per API request.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, path_prefix: str = "/api"):
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not path.startswith(self.path_prefix):
            return await call_next(request)

        rid = uuid.uuid4().hex
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            dur_ms = (time.perf_counter() - start) * 1000
            logger.exception("%s %s failed in %.0fms", request.method, path, dur_ms)
            raise
        dur_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %s in %.0fms", request.method, path, response.status_code, dur_ms)
        response.headers["x-request-id"] = rid
        return response
