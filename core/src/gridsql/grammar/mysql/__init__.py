"""MySQL-family grammars."""

from gridsql.grammar.mysql.grammar import MariaDbGrammar, MySqlGrammar

__all__ = [
    "MySqlGrammar",
    "MariaDbGrammar",
]
