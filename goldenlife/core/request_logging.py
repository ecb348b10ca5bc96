"""Access logging for the image proxy app.

One line per request with method, path, status and duration. Request
bodies are never logged: image prompts may contain personal data.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from goldenlife.core.logging import env_bool

logger = logging.getLogger("goldenlife.request")


def _request_fields(request: Request) -> dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query,
        "client_ip": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            # No status means the app raised before producing a response.
            failed = status_code is None or status_code >= 500
            (logger.error if failed else logger.info)(
                "%s %s -> %s (%.2fms)",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
                extra={
                    **_request_fields(request),
                    "status_code": status_code,
                    "duration_ms": elapsed_ms,
                },
            )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach the access log unless LOG_REQUESTS is switched off."""
    if env_bool("LOG_REQUESTS", default=True):
        app.add_middleware(RequestLoggingMiddleware)
