"""Constants module for gridsql.

This module contains all constant values and enumerations used throughout
gridsql. As Layer 0 in the architecture, this module has no dependencies
on other gridsql modules.

Organization:
    - sql: Driver identifiers, comparison operators, placeholders
    - date_format: Canonical date-format specifier alphabet
    - filters: Filter parameter suffixes and boolean column defaults
"""

from gridsql.constants.sql import (
    ComparisonOperator,
    DEFAULT_PLACEHOLDER,
    Driver,
    SQLALCHEMY_DIALECT_ALIASES,
)
from gridsql.constants.date_format import CANONICAL_TOKENS, DateToken, TOKEN_PREFIX
from gridsql.constants.filters import (
    BOOL_TAG_SUFFIX,
    BOOL_TEXT_SUFFIX,
    DEFAULT_FALSE_TAG,
    DEFAULT_TRUE_TAG,
    RANGE_LOWER_SUFFIX,
    RANGE_UPPER_SUFFIX,
)

__all__ = [
    "Driver",
    "ComparisonOperator",
    "DEFAULT_PLACEHOLDER",
    "SQLALCHEMY_DIALECT_ALIASES",
    "DateToken",
    "CANONICAL_TOKENS",
    "TOKEN_PREFIX",
    "RANGE_LOWER_SUFFIX",
    "RANGE_UPPER_SUFFIX",
    "BOOL_TEXT_SUFFIX",
    "BOOL_TAG_SUFFIX",
    "DEFAULT_TRUE_TAG",
    "DEFAULT_FALSE_TAG",
]
