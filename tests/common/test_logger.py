import json
import logging

from flask import g

from extensions.logger import JsonFormatter, RequestContextFilter


def _record(msg="hello"):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, None, None)


def test_filter_attaches_request_and_user_id(app):
    with app.test_request_context("/api/history"):
        g.request_id = "req-1"
        g.current_user_id = "user-42"
        record = _record()

        assert RequestContextFilter().filter(record) is True

    assert record.request_id == "req-1"
    assert record.user_id == "user-42"


def test_filter_outside_request_uses_placeholders():
    record = _record()
    RequestContextFilter().filter(record)
    assert record.request_id == "-"
    assert record.user_id == "-"


def test_json_formatter_includes_user_id(app):
    with app.test_request_context("/api/translate"):
        g.current_user_id = "user-7"
        record = _record("translated")
        RequestContextFilter().filter(record)

    data = json.loads(JsonFormatter().format(record))

    assert data["msg"] == "translated"
    assert data["user_id"] == "user-7"
    assert data["level"] == "INFO"
