"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of logs across requests and the builders they create.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional
from gridsql.__version__ import __version__

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
table_var: ContextVar[Optional[str]] = ContextVar("table", default=None)
driver_var: ContextVar[Optional[str]] = ContextVar("driver", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    This filter extracts values from context variables and adds them to
    log records. Static context set through ``set_logging_context`` is
    added only when configured.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "request_id", request_id_var.get())
        setattr(record, "table", table_var.get())
        setattr(record, "driver", driver_var.get())
        setattr(record, "sdk_name", "gridsql")
        setattr(record, "sdk_version", __version__)

        for key, value in _static_context.items():
            if not hasattr(record, key):
                setattr(record, key, value)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context attached to every record.

    Passing ``None`` for both arguments clears it.
    """
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


def set_request_context(
    request_id: Optional[str] = None,
    table: Optional[str] = None,
    driver: Optional[str] = None,
) -> None:
    """Set request context variables."""
    if request_id is not None:
        request_id_var.set(request_id)
    if table is not None:
        table_var.set(table)
    if driver is not None:
        driver_var.set(driver)


def clear_request_context() -> None:
    """Clear all request context variables."""
    request_id_var.set(None)
    table_var.set(None)
    driver_var.set(None)
