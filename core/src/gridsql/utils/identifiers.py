"""Identifier validation and literal quoting helpers.

Aliases, table names and column names end up interpolated into SQL text,
so they are restricted to plain identifiers. Values supplied at request
time never pass through here; they are always bound parameters.
"""

import re

from gridsql.common.exceptions import ErrorCode, validation_error

_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_MAX_IDENTIFIER_LENGTH = 128


def _invalid(message, identifier_type, identifier):
    return validation_error(
        message, field=identifier_type, value=identifier, error_code=ErrorCode.INVALID_IDENTIFIER
    )


def validate_identifier(identifier: str, identifier_type: str = "identifier", allow_qualified: bool = False) -> str:
    """Validate an identifier for safe interpolation into SQL.

    Args:
        identifier: The identifier to validate
        identifier_type: Type of identifier for error messages
        allow_qualified: Accept dotted names such as ``schema.table``

    Returns:
        The identifier, unchanged

    Raises:
        GridValidationError: If identifier is invalid (also a ValueError)
    """
    if not isinstance(identifier, str) or not identifier:
        raise _invalid(f"Empty {identifier_type} name", identifier_type, identifier)

    if len(identifier) > _MAX_IDENTIFIER_LENGTH:
        raise _invalid(f"{identifier_type} name too long: {identifier}", identifier_type, identifier)

    parts = identifier.split(".") if allow_qualified else [identifier]
    for part in parts:
        if not _IDENTIFIER_PATTERN.match(part):
            raise _invalid(f"Invalid {identifier_type} name: {identifier}", identifier_type, identifier)

    return identifier


def is_qualified(column_ref: str) -> bool:
    return "." in column_ref


def qualify(table: str, column: str) -> str:
    """Return ``table.column`` unless ``column`` is already qualified."""
    if is_qualified(column):
        return column
    return f"{table}.{column}"


def quote_string(value: str) -> str:
    """Quote a string value as a SQL literal.

    Args:
        value: String value to quote

    Returns:
        Properly quoted and escaped string
    """
    # Escape single quotes by doubling them
    escaped = str(value).replace("'", "''")
    return f"'{escaped}'"
