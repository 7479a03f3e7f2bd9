from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ErrorCode(Enum):
    """Standard error codes for gridsql.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has a specific number range for easy identification.

    Attributes:
        VALIDATION_*: Input validation errors
        DIALECT_*: Dialect resolution and registration errors
    """
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ARGUMENT = "VALIDATION_002"
    INVALID_IDENTIFIER = "VALIDATION_003"
    INVALID_DATE_FORMAT = "VALIDATION_004"

    # Dialect errors
    UNSUPPORTED_DIALECT = "DIALECT_001"
    INVALID_GRAMMAR = "DIALECT_002"


class GridSQLError(Exception):
    """Base exception for all gridsql errors.

    This exception class uses error codes for categorization instead of
    creating numerous specific exception classes. The few subclasses that
    exist carry extra attributes callers need to react to.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize gridsql error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from gridsql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class UnsupportedDialectError(GridSQLError):
    """Raised when no grammar is registered for a database driver.

    This is a configuration error, not a transient one: the builder that
    triggered it is never constructed and retrying cannot help.

    Attributes:
        driver: The driver name that failed to resolve (None if none was configured)
        known_drivers: Driver names registered at resolution time
    """

    def __init__(self, driver: Optional[str], known_drivers: Iterable[str]):
        self.driver = driver
        self.known_drivers: List[str] = sorted(known_drivers)
        supported = ", ".join(self.known_drivers) if self.known_drivers else "none"
        if driver is None:
            message = (
                "No database driver configured. "
                f"Supported drivers: {supported}. "
                "Pass driver=... or set GRIDSQL_DEFAULT_DRIVER."
            )
        else:
            message = (
                f"Database driver [{driver}] is not supported. "
                f"Supported drivers: {supported}. "
                "You can register a custom grammar using register_grammar()."
            )
        super().__init__(
            message=message,
            error_code=ErrorCode.UNSUPPORTED_DIALECT,
            details={"driver": driver, "known_drivers": self.known_drivers},
        )


class DateFormatError(GridSQLError):
    """Raised in strict mode when a date format contains unknown tokens.

    Attributes:
        date_format: The offending format string
        unknown_tokens: Tokens not in the canonical alphabet, in order of appearance
    """

    def __init__(self, date_format: str, unknown_tokens: List[str]):
        self.date_format = date_format
        self.unknown_tokens = unknown_tokens
        super().__init__(
            message=(
                f"Unknown date format token(s) {', '.join(unknown_tokens)} "
                f"in '{date_format}'"
            ),
            error_code=ErrorCode.INVALID_DATE_FORMAT,
            details={"date_format": date_format, "unknown_tokens": unknown_tokens},
        )


class GridValidationError(GridSQLError, ValueError):
    """Raised when a caller-supplied argument is rejected.

    Also a ValueError, so callers that only know the builtin contract
    keep working.
    """


class InvalidGrammarError(GridSQLError, TypeError):
    """Raised when a grammar factory is not callable or builds something
    other than a BaseGrammar.

    Attributes:
        driver: Driver name the factory was registered under
    """

    def __init__(self, driver: str, message: str):
        self.driver = driver
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_GRAMMAR,
            details={"driver": driver},
        )


# Helper functions for common error scenarios
def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
) -> GridValidationError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        error_code: More specific VALIDATION_* code, if any

    Returns:
        GridValidationError carrying the field and value as details
    """
    details: Dict[str, Any] = {}
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return GridValidationError(message=message, error_code=error_code, details=details)


def invalid_argument_error(message: str, field: Optional[str] = None, value: Any = None) -> GridValidationError:
    return validation_error(message, field=field, value=value, error_code=ErrorCode.INVALID_ARGUMENT)


def unsupported_dialect_error(
    driver: Optional[str],
    known_drivers: Iterable[str],
) -> UnsupportedDialectError:
    """Create an unsupported dialect error.

    Args:
        driver: Driver name that could not be resolved
        known_drivers: Currently registered driver names

    Returns:
        UnsupportedDialectError listing the known drivers
    """
    return UnsupportedDialectError(driver, known_drivers)
