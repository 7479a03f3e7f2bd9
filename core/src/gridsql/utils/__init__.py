"""Utility functions and helpers for gridsql.

This module provides common helpers used throughout the package.
"""

from gridsql.utils.decorators import traced
from gridsql.utils.identifiers import (
    is_qualified,
    qualify,
    quote_string,
    validate_identifier,
)

__all__ = [
    # Decorators
    "traced",
    # Identifier helpers
    "validate_identifier",
    "qualify",
    "is_qualified",
    "quote_string",
]
