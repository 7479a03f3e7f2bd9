"""PostgreSQL grammar implementation."""

from typing import Dict

from gridsql.constants import Driver, DateToken
from gridsql.grammar.base import BaseGrammar
from gridsql.grammar.date_format import translate_date_format
from gridsql.utils import quote_string


class PostgresGrammar(BaseGrammar):
    """Grammar for PostgreSQL.

    PostgreSQL differs from the canonical (MySQL) forms in every operation:
        - TO_CHAR() with its own template patterns instead of DATE_FORMAT()
        - CASE WHEN ... THEN ... ELSE ... END instead of IF()
        - COALESCE() instead of IFNULL()
        - ``||`` instead of CONCAT(), to keep MySQL's NULL propagation
        - ILIKE on a text cast, since LIKE is case-sensitive and does not
          accept non-text operands
    """

    # Canonical specifier -> TO_CHAR template pattern
    DATE_FORMAT_MAP: Dict[str, str] = {
        DateToken.YEAR.value: "YYYY",
        DateToken.YEAR_SHORT.value: "YY",
        DateToken.MONTH.value: "MM",
        DateToken.DAY.value: "DD",
        DateToken.DAY_NO_PAD.value: "FMDD",
        DateToken.HOUR_24.value: "HH24",
        DateToken.HOUR_12.value: "HH12",
        DateToken.MINUTE.value: "MI",
        DateToken.SECOND.value: "SS",
        DateToken.MONTH_NAME.value: "FMMonth",
        DateToken.MONTH_ABBR.value: "Mon",
        DateToken.WEEKDAY_NAME.value: "FMDay",
        DateToken.WEEKDAY_ABBR.value: "Dy",
        DateToken.MERIDIEM.value: "AM",
        DateToken.TIME_24.value: "HH24:MI:SS",
        DateToken.TIME_12.value: "HH12:MI:SS AM",
        DateToken.PERCENT.value: "%",
    }

    @property
    def driver_name(self) -> str:
        return Driver.PGSQL.value

    def convert_date_format(self, date_format: str) -> str:
        """Convert a canonical format to a TO_CHAR template.

        Args:
            date_format: Canonical format (e.g., '%d-%b-%Y')

        Returns:
            PostgreSQL template (e.g., 'DD-Mon-YYYY')
        """
        return translate_date_format(date_format, self.DATE_FORMAT_MAP)

    def date_format(self, column: str, date_format: str) -> str:
        pg_format = self.convert_date_format(date_format)
        return f"(TO_CHAR({column}, {quote_string(pg_format)}))"

    def conditional(self, condition: str, true_value: str, false_value: str) -> str:
        return f"(CASE WHEN {condition} THEN {true_value} ELSE {false_value} END)"

    def if_null(self, expression: str, default: str) -> str:
        return f"COALESCE({expression}, {default})"

    def concat(self, *parts: str) -> str:
        """Concatenate with ``||`` over text casts.

        PostgreSQL's CONCAT() skips NULL arguments while MySQL's returns NULL.
        ``||`` propagates NULL like MySQL, so ``if_null(concat(...))`` falls
        back to its default on both dialects.
        """
        self._check_concat_parts(parts)
        return "(" + " || ".join(f"CAST({part} AS TEXT)" for part in parts) + ")"

    def like(self, column: str, placeholder: str = "?") -> str:
        return f"{column}::text ILIKE {placeholder}"
