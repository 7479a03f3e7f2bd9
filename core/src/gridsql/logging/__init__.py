"""Logging infrastructure for gridsql.

This module provides structured logging with JSON output, context tracking
(request id, table, driver) and OpenTelemetry trace correlation.
"""

from gridsql.logging.filters import (
    ContextFilter,
    clear_request_context,
    set_logging_context,
    set_request_context,
)
from gridsql.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "set_request_context",
    "clear_request_context",
]
