"""Error responses for the image proxy app.

Whatever goes wrong, the proxy answers with the backend API's error body,
`{"type": ..., "message": ...}`, so ApiClient.error_from_response reads
proxy errors the same way it reads API errors.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from goldenlife.core.exceptions import AppException

logger = logging.getLogger("goldenlife.exception")


def error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"type": error_type, "message": message}
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Domain errors keep their own status and type; 5xx are logged as errors."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "%s %s failed: %s - %s",
        request.method,
        request.url.path,
        exc.error_type,
        exc.message,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": exc.error_type,
        },
    )
    return error_response(exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown paths and wrong methods."""
    return error_response(exc.status_code, "http_error", str(exc.detail))


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies, e.g. an unsupported image size."""
    return error_response(422, "validation_error", _describe_validation_errors(exc))


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=exc,
    )
    return error_response(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
