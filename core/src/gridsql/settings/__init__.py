"""Settings module providing configuration management for gridsql.

Built on Pydantic Settings: values come from ``GRIDSQL_*`` environment
variables, an optional ``.env`` file, then code defaults.

Layout:
    - base.py: GridBaseSettings, shared model config (prefix, .env, case)
    - query.py: QuerySettings, date-format strictness, search wildcard,
      boolean column tags and request parameter names
    - main.py: GridSettings aggregator, get_settings() singleton

Environment Variables:
    - GRIDSQL_DEFAULT_DRIVER: driver used when none is passed to a builder
    - GRIDSQL_LOG_LEVEL: level for setup_logging()
    - GRIDSQL_STRICT_DATE_FORMATS: reject unknown date-format tokens
    - GRIDSQL_SEARCH_WILDCARD: wildcard wrapped around search text
    - GRIDSQL_BOOL_TRUE_TAG / GRIDSQL_BOOL_FALSE_TAG: boolean column tags
    - GRIDSQL_SEARCH_PARAM / GRIDSQL_FILTER_PARAM: request parameter names

Quick Start:
    >>> from gridsql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.query.strict_date_formats
    False
"""

from .main import GridSettings, get_settings, _reload_settings
from .base import GridBaseSettings
from .query import QuerySettings

__all__ = [
    "GridSettings",
    "GridBaseSettings",
    "QuerySettings",
    "get_settings",
]
