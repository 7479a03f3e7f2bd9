"""SQL dialect grammars.

A grammar renders six canonical operations (date formatting, conditional,
null-coalescing, concatenation, case-insensitive match, driver name) for
one database engine. Everything else in gridsql is dialect-neutral and
goes through a grammar for dialect syntax.

Architecture:
    - base.py: BaseGrammar, the abstract contract
    - date_format.py: canonical -> native date-format translation
    - mysql/: MySqlGrammar, MariaDbGrammar (native canonical formats)
    - postgres/: PostgresGrammar (translated formats)
    - registry.py: process-wide driver name -> grammar factory mapping

Platform Differences:
    MySQL / MariaDB:
        - DATE_FORMAT(), IF(), IFNULL(), CONCAT(), LIKE

    PostgreSQL:
        - TO_CHAR(), CASE WHEN, COALESCE(), ||, ::text ILIKE

Example:
    >>> from gridsql.grammar import resolve_grammar
    >>> grammar = resolve_grammar("pgsql")
    >>> grammar.date_format("orders.created_at", "%d-%b-%Y")
    "(TO_CHAR(orders.created_at, 'DD-Mon-YYYY'))"
"""

from gridsql.grammar.base import BaseGrammar
from gridsql.grammar.date_format import find_unknown_tokens, order_by_length, translate_date_format
from gridsql.grammar.mysql import MariaDbGrammar, MySqlGrammar
from gridsql.grammar.postgres import PostgresGrammar
from gridsql.grammar.registry import (
    BUILTIN_GRAMMARS,
    DialectRegistry,
    GrammarFactory,
    get_dialect_registry,
    get_known_drivers,
    register_grammar,
    resolve_grammar,
)

__all__ = [
    "BaseGrammar",
    "MySqlGrammar",
    "MariaDbGrammar",
    "PostgresGrammar",
    "DialectRegistry",
    "GrammarFactory",
    "BUILTIN_GRAMMARS",
    "get_dialect_registry",
    "get_known_drivers",
    "register_grammar",
    "resolve_grammar",
    "translate_date_format",
    "find_unknown_tokens",
    "order_by_length",
]
