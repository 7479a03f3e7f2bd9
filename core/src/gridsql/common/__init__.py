"""Common exceptions for gridsql.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    GridSQLError and include structured error information. The few
    subclasses exist because callers catch them by type:
    UnsupportedDialectError and DateFormatError carry attributes callers
    read, while GridValidationError and InvalidGrammarError also derive
    from ValueError and TypeError respectively.
"""

from gridsql.common.exceptions import (
    DateFormatError,
    ErrorCode,
    GridSQLError,
    GridValidationError,
    InvalidGrammarError,
    UnsupportedDialectError,
    # Helper functions
    invalid_argument_error,
    unsupported_dialect_error,
    validation_error,
)

__all__ = [
    # Base Exception and Error Codes
    "GridSQLError",
    "ErrorCode",
    "UnsupportedDialectError",
    "DateFormatError",
    "GridValidationError",
    "InvalidGrammarError",
    # Helper functions
    "validation_error",
    "invalid_argument_error",
    "unsupported_dialect_error",
]
