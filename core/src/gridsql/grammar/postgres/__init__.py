"""PostgreSQL grammar."""

from gridsql.grammar.postgres.grammar import PostgresGrammar

__all__ = [
    "PostgresGrammar",
]
