"""JSON log output for gridsql.

Every record is rendered as one JSON object per line. Request context
(table, driver, request id) comes from ``ContextFilter``; trace and span
ids come from the active OpenTelemetry span, so builder logs line up with
the ``gridsql.query.*`` spans.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional

from opentelemetry import trace

_FORMATTER_NAME = "gridsql_json"
_FILTER_NAME = "gridsql_context"

# Attributes every LogRecord carries; anything else on a record came from
# ``extra=`` or a filter and is emitted as a top-level field.
_STANDARD_ATTRIBUTES: FrozenSet[str] = frozenset(
    logging.makeLogRecord({}).__dict__
) | {"asctime", "message"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class CustomJsonFormatter(logging.Formatter):
    """Render records as JSON with request context and trace ids."""

    def format(self, record: logging.LogRecord) -> str:
        payload = self._extra_fields(record)
        payload.update(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        payload.update(self._trace_fields())
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)

    @staticmethod
    def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
        # None-valued context (e.g. no request id) is left out entirely.
        return {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES and value is not None
        }

    @staticmethod
    def _trace_fields() -> Dict[str, str]:
        context = trace.get_current_span().get_span_context()
        if not context.is_valid:
            return {}
        return {
            "trace_id": format(context.trace_id, "032x"),
            "span_id": format(context.span_id, "016x"),
        }


def _logging_config(level: str) -> Dict[str, Any]:
    """dictConfig schema: one stdout handler, JSON formatted, context filtered."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {_FORMATTER_NAME: {"()": CustomJsonFormatter}},
        "filters": {_FILTER_NAME: {"()": "gridsql.logging.filters.ContextFilter"}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "level": level,
                "formatter": _FORMATTER_NAME,
                "filters": [_FILTER_NAME],
            }
        },
        "root": {"level": level, "handlers": ["stdout"]},
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Send gridsql (and all other) logs to stdout as JSON lines.

    Args:
        level: Root log level name, case-insensitive. Defaults to
            ``GridSettings.log_level`` (``GRIDSQL_LOG_LEVEL``).
    """
    if level is None:
        # Settings import logging helpers; resolve lazily.
        from gridsql.settings import get_settings
        level = get_settings().log_level

    logging.config.dictConfig(_logging_config(level.upper()))
