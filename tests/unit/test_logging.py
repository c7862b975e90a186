"""Unit tests for structured logging helpers."""

import json
import logging

from libs.common.logging import (
    JsonFormatter,
    RequestContextFilter,
    clear_request_context,
    get_request_id,
    set_request_context,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="rideshare", level=logging.INFO, pathname=__file__, lineno=1,
        msg=message, args=(), exc_info=None,
    )


def test_set_request_context_generates_id():
    request_id = set_request_context(path="/api/riders", method="GET")
    try:
        assert request_id
        assert get_request_id() == request_id
    finally:
        clear_request_context()

    assert get_request_id() is None


def test_json_formatter_includes_request_context_and_extra_fields():
    set_request_context(request_id="req-1", path="/api/riders", method="POST")
    try:
        record = _record()
        RequestContextFilter().filter(record)
        record.extra_fields = {"status_code": 201}

        payload = json.loads(JsonFormatter().format(record))
    finally:
        clear_request_context()

    assert payload["message"] == "hello"
    assert payload["request_id"] == "req-1"
    assert payload["path"] == "/api/riders"
    assert payload["method"] == "POST"
    assert payload["status_code"] == 201


def test_filter_outside_request_uses_placeholder():
    record = _record()

    RequestContextFilter().filter(record)

    assert record.request_id == "-"
