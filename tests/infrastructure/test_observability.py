"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from backstage_app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "backstage_app.access", logging.INFO, __file__, 1, "GET %s", ("/health",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "backstage_app.access"
    assert payload["message"] == "GET /health"
    assert "timestamp" in payload


def test_json_formatter_surfaces_request_extras():
    payload = json.loads(JSONFormatter().format(
        _record(method="GET", path="/health", status_code=200, duration_ms=1.25),
    ))
    assert payload["method"] == "GET"
    assert payload["status_code"] == 200
    assert payload["duration_ms"] == 1.25


def test_json_formatter_skips_unknown_extras():
    payload = json.loads(JSONFormatter().format(_record(secret="hunter2")))
    assert "secret" not in payload


def test_setup_logging_is_idempotent():
    setup_logging("INFO", "text")
    setup_logging("DEBUG", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "backstage_app"]
    assert len(named) == 1
    assert logging.root.level == logging.DEBUG
    logging.root.setLevel(logging.INFO)
