import json
import logging
import sys

import pytest
from opentelemetry import trace

from gridsql.logging import ContextFilter, CustomJsonFormatter, setup_logging
from gridsql.logging.filters import clear_request_context, set_request_context


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="gridsql.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=5,
        msg="resolved %s",
        args=("pgsql",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_extras():
    payload = json.loads(CustomJsonFormatter().format(_record(error_code="DIALECT_001")))

    assert payload["message"] == "resolved pgsql"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "gridsql.test"
    assert payload["error_code"] == "DIALECT_001"
    assert "timestamp" in payload
    assert "trace_id" not in payload


def test_formatter_skips_none_context():
    record = _record()
    ContextFilter().filter(record)
    payload = json.loads(CustomJsonFormatter().format(record))

    assert "request_id" not in payload
    assert payload["sdk_name"] == "gridsql"


def test_formatter_includes_request_context():
    set_request_context(request_id="req-9", table="peserta")
    try:
        record = _record()
        ContextFilter().filter(record)
        payload = json.loads(CustomJsonFormatter().format(record))
    finally:
        clear_request_context()

    assert payload["request_id"] == "req-9"
    assert payload["table"] == "peserta"


def test_formatter_includes_exception():
    try:
        raise ValueError("bad alias")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(CustomJsonFormatter().format(record))
    assert "ValueError: bad alias" in payload["exception"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_configures_root(restore_root_logger):
    setup_logging("debug")

    assert restore_root_logger.level == logging.DEBUG
    handler = restore_root_logger.handlers[-1]
    assert isinstance(handler.formatter, CustomJsonFormatter)
    assert any(isinstance(f, ContextFilter) for f in handler.filters)


def test_setup_logging_defaults_to_settings_level(restore_root_logger, settings, monkeypatch):
    settings.log_level = "ERROR"
    monkeypatch.setattr("gridsql.settings.get_settings", lambda: settings)

    setup_logging()

    assert restore_root_logger.level == logging.ERROR


def test_formatter_includes_trace_ids():
    context = trace.SpanContext(trace_id=0x1F, span_id=0x2A, is_remote=False)
    with trace.use_span(trace.NonRecordingSpan(context)):
        payload = json.loads(CustomJsonFormatter().format(_record()))

    assert payload["trace_id"] == format(0x1F, "032x")
    assert payload["span_id"] == format(0x2A, "016x")
