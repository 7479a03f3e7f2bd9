from abc import ABC, abstractmethod

from gridsql.common.exceptions import invalid_argument_error


class BaseGrammar(ABC):
    """Base interface for SQL dialect grammars.

    A grammar turns canonical, dialect-neutral requests into SQL fragments
    for one database engine. It is the only place dialect syntax lives:
    the column registry, filter composer and query assembler call these
    six operations and never branch on the driver themselves.

    Grammars are stateless. Every operation is a pure string-in/string-out
    function, so one instance can be shared by any number of builders
    and threads.

    Quoting Contract:
        Grammar operations do not escape their arguments. Callers pass
        column references as-is and literals already quoted (see
        ``gridsql.utils.quote_string``). The one exception is the date
        format, which is always a literal and is quoted here.

    Implementing a new dialect:
        >>> class SqliteGrammar(BaseGrammar):
        ...     @property
        ...     def driver_name(self) -> str:
        ...         return "sqlite"
        ...     ...
        >>> register_grammar("sqlite", SqliteGrammar)
    """

    @property
    @abstractmethod
    def driver_name(self) -> str:
        """Stable identifier matching the registry key."""
        pass

    @abstractmethod
    def date_format(self, column: str, date_format: str) -> str:
        """Build an expression rendering a date/time column as text.

        Args:
            column: Full column reference (e.g., 'peserta.created_at')
            date_format: Format in the canonical alphabet (e.g., '%d-%b-%Y')

        Returns:
            Parenthesized SQL expression
        """
        pass

    @abstractmethod
    def conditional(self, condition: str, true_value: str, false_value: str) -> str:
        """Build a ternary expression.

        Args:
            condition: SQL condition
            true_value: Expression selected when condition holds
            false_value: Expression selected otherwise

        Returns:
            Parenthesized SQL expression
        """
        pass

    @abstractmethod
    def if_null(self, expression: str, default: str) -> str:
        """Build a null-coalescing expression.

        Args:
            expression: SQL expression that may be NULL
            default: Expression used when it is

        Returns:
            SQL expression
        """
        pass

    @abstractmethod
    def concat(self, *parts: str) -> str:
        """Build a string concatenation of two or more parts.

        Args:
            *parts: SQL expressions or quoted literals

        Returns:
            SQL expression

        Raises:
            ValueError: If fewer than two parts are given
        """
        pass

    @abstractmethod
    def like(self, column: str, placeholder: str = "?") -> str:
        """Build a case-insensitive pattern match against one bound value.

        Args:
            column: Column reference or expression
            placeholder: Bound parameter token

        Returns:
            SQL predicate (e.g., "column LIKE ?" or "column::text ILIKE ?")
        """
        pass

    def _check_concat_parts(self, parts: tuple) -> None:
        if len(parts) < 2:
            raise invalid_argument_error(
                f"{self.__class__.__name__}.concat() needs at least two parts, got {len(parts)}",
                field="parts",
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(driver_name={self.driver_name!r})"
