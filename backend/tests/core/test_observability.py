"""Structured Logging — JSON formatter surfaces known extra fields."""

import json
import logging

from exercise_tracker.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "exercise_tracker.services.user_store", logging.INFO, __file__, 1,
        "User created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "exercise_tracker.services.user_store"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_json_formatter_includes_present_extras_only():
    log = json.loads(JSONFormatter().format(_record(user_id="a" * 24, username=None)))
    assert log["user_id"] == "a" * 24
    assert "username" not in log
