"""Tests for goldenlife/core/logging.py - Logging configuration."""

import json
import logging

import pytest

from goldenlife.core.logging import JsonFormatter, configure_logging, env_bool


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), (" Yes ", True), ("0", False), ("off", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_FLAG", raw)

    assert env_bool("LOG_FLAG", default=not expected) is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("LOG_FLAG", raising=False)

    assert env_bool("LOG_FLAG", default=True) is True


def test_json_formatter_includes_known_extras():
    record = logging.LogRecord(
        "goldenlife.auth.session", logging.INFO, __file__, 1, "Session %s", ("x",), None
    )
    record.session_status = "authenticated"
    record.secret = "not exported"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["logger"] == "goldenlife.auth.session"
    assert payload["msg"] == "Session x"
    assert payload["session_status"] == "authenticated"
    assert "secret" not in payload


def test_configure_logging_uses_json_formatter(monkeypatch):
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging()

        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
