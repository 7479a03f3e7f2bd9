"""Canonical date-format specifier alphabet.

Every grammar accepts date formats written in this alphabet. The tokens
are the MySQL ``DATE_FORMAT`` specifiers, so the MySQL grammar renders
them as-is while other grammars translate them.
"""

from enum import Enum


class DateToken(str, Enum):
    """Canonical two-character date-format tokens."""

    YEAR = "%Y"                 # 4-digit year
    YEAR_SHORT = "%y"           # 2-digit year
    MONTH = "%m"                # month number, 01-12
    DAY = "%d"                  # day of month, 01-31
    DAY_NO_PAD = "%e"           # day of month, 1-31
    HOUR_24 = "%H"              # 00-23
    HOUR_12 = "%h"              # 01-12
    MINUTE = "%i"               # 00-59
    SECOND = "%s"               # 00-59
    MONTH_NAME = "%M"           # January ...
    MONTH_ABBR = "%b"           # Jan ...
    WEEKDAY_NAME = "%W"         # Sunday ...
    WEEKDAY_ABBR = "%a"         # Sun ...
    MERIDIEM = "%p"             # AM / PM
    TIME_24 = "%T"              # hh:mm:ss, 24-hour
    TIME_12 = "%r"              # hh:mm:ss AM, 12-hour
    PERCENT = "%%"              # literal percent


CANONICAL_TOKENS = frozenset(token.value for token in DateToken)

# Introduces every canonical token.
TOKEN_PREFIX = "%"
