"""MySQL / MariaDB grammar implementation."""

from gridsql.constants import Driver
from gridsql.grammar.base import BaseGrammar
from gridsql.utils import quote_string


class MySqlGrammar(BaseGrammar):
    """Grammar for MySQL.

    The canonical date-format alphabet is MySQL's own ``DATE_FORMAT``
    specifier set, so formats are rendered without translation:
        %d = day, %b = abbreviated month, %M = full month,
        %Y = 4-digit year, %H = 24h hour, %i = minute,
        %s = second, %W = full weekday name

    ``LIKE`` is case-insensitive under the default collations, so no cast
    is added around the searched expression.
    """

    @property
    def driver_name(self) -> str:
        return Driver.MYSQL.value

    def date_format(self, column: str, date_format: str) -> str:
        """Use MySQL's built-in DATE_FORMAT()."""
        return f"(DATE_FORMAT({column}, {quote_string(date_format)}))"

    def conditional(self, condition: str, true_value: str, false_value: str) -> str:
        """Use MySQL's three-argument IF()."""
        return f"(IF({condition}, {true_value}, {false_value}))"

    def if_null(self, expression: str, default: str) -> str:
        return f"IFNULL({expression}, {default})"

    def concat(self, *parts: str) -> str:
        self._check_concat_parts(parts)
        return f"CONCAT({', '.join(parts)})"

    def like(self, column: str, placeholder: str = "?") -> str:
        return f"{column} LIKE {placeholder}"


class MariaDbGrammar(MySqlGrammar):
    """Grammar for MariaDB; syntax is identical to MySQL for every operation."""

    @property
    def driver_name(self) -> str:
        return Driver.MARIADB.value
