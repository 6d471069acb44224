"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from assignment_api.infrastructure.observability import (
    EXTRA_FIELDS, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "assignment_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "assignment_api.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(substitution="base", error_code="Parse.MalformedLine", unrelated="x"),
    ))
    assert log["substitution"] == "base"
    assert log["error_code"] == "Parse.MalformedLine"
    assert "unrelated" not in log


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "assignment_api"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_extra_fields_are_the_ones_the_app_logs():
    assert EXTRA_FIELDS == ("substitution", "error_code", "path")
