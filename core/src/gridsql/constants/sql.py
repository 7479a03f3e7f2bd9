"""SQL and dialect-related constants.

This module contains the fundamental enums shared by grammars, the
filter composer and the query assembler. It is Layer 0: nothing here
imports from the rest of the package.
"""

from enum import Enum


class Driver(str, Enum):
    """Built-in database driver identifiers.

    These are the keys the dialect registry is populated with at import
    time. Custom drivers registered later are plain strings and do not
    need an entry here.

    Values:
        MYSQL: MySQL, renders canonical date formats natively
        MARIADB: MariaDB, same grammar family as MySQL
        PGSQL: PostgreSQL, translates canonical date formats to TO_CHAR
    """

    MYSQL = "mysql"
    MARIADB = "mariadb"
    PGSQL = "pgsql"


class ComparisonOperator(str, Enum):
    """Comparison operators accepted by range conditions.

    Only inclusive bounds are used by the range filter, so the set is
    deliberately closed.
    """

    GREATER_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="


# Placeholder token handed to ``like()`` when the query handle does not
# declare its own.
DEFAULT_PLACEHOLDER = "?"

# SQLAlchemy dialect names that differ from registry driver names.
SQLALCHEMY_DIALECT_ALIASES = {
    "postgresql": Driver.PGSQL.value,
    "postgres": Driver.PGSQL.value,
}
