"""Logging setup shared by the client core and the image proxy.

Everything goes to one stdout handler on the root logger; goldenlife's
module loggers, uvicorn and httpx all propagate into it. The knobs are read
from the environment rather than Settings so logging can be configured
before anything else is imported.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Record attributes copied into JSON output when a caller passes them via
# `extra=`: request fields from the proxy middleware, session and locale
# fields from the client core.
JSON_FIELDS = (
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
    "session_status",
    "language",
)

_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})


def env_bool(name: str, *, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (name, record.__dict__[name])
            for name in JSON_FIELDS
            if name in record.__dict__
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _propagating(level: str) -> dict[str, Any]:
    return {"level": level, "propagate": True}


def configure_logging() -> None:
    """Install the goldenlife logging configuration.

    Environment:
        LOG_LEVEL: root level (default INFO)
        LOG_JSON: emit JSON lines instead of text (default false)
        LOG_REQUESTS: proxy request logging middleware on/off (default true)
        LOG_UVICORN_ACCESS: uvicorn's own access log; defaults to the
            opposite of LOG_REQUESTS so each request is logged once
        HTTPX_LOG_LEVEL: level for httpx's per-request lines (default WARNING)
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    access_log = env_bool(
        "LOG_UVICORN_ACCESS", default=not env_bool("LOG_REQUESTS", default=True)
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
                },
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stdout,
                    "level": level,
                    "formatter": "json" if env_bool("LOG_JSON", default=False) else "text",
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": {
                "uvicorn": _propagating(level),
                "uvicorn.error": _propagating(level),
                "uvicorn.access": _propagating("INFO" if access_log else "WARNING"),
                "httpx": _propagating(os.getenv("HTTPX_LOG_LEVEL", "WARNING")),
            },
        }
    )
