"""SQLAlchemy query handle.

Implements the QueryHandle protocol on top of a SQLAlchemy Core ``Select``
so that builder output can be executed directly on an Engine or
Connection.

Column references and computed expressions are raw SQL fragments. They are
rendered verbatim with ``literal_column``; every request value becomes a
bound parameter.

Example:
    >>> engine = create_engine("postgresql+psycopg://...")
    >>> builder = builder_for_engine(engine, "peserta")
    >>> query = SqlAlchemyQuery.for_table("peserta")
    >>> builder.add_bool("blokir", "Ya", "Tidak").build_select(query)
    >>> builder.apply_global_search(query, "smith", ["nama"])
    >>> rows = connection.execute(query.statement).mappings().all()
"""

import itertools
from operator import ge, le
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from sqlalchemy import Select, bindparam, literal_column, or_, select, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.elements import ColumnElement

from gridsql.common.exceptions import invalid_argument_error
from gridsql.constants import DEFAULT_PLACEHOLDER, SQLALCHEMY_DIALECT_ALIASES, ComparisonOperator
from gridsql.logging import get_logger
from gridsql.protocols import DisjunctionBranch, ProjectionItem
from gridsql.query.builder import DatatableQueryBuilder
from gridsql.settings import GridSettings
from gridsql.utils import validate_identifier

logger = get_logger(__name__)

_COMPARISONS: Dict[str, Callable[[Any, Any], ColumnElement]] = {
    ComparisonOperator.GREATER_OR_EQUAL.value: ge,
    ComparisonOperator.LESS_OR_EQUAL.value: le,
}


def _escape_colons(sql: str) -> str:
    # text() treats ":name" as a bind parameter
    return sql.replace(":", r"\:")


class SqlAlchemyQuery:
    """Mutable wrapper around a SQLAlchemy ``Select``.

    Attributes:
        placeholder: Token replaced by a bound parameter in disjunction
            templates
    """

    placeholder: str = DEFAULT_PLACEHOLDER

    def __init__(self, statement: Select, bind_prefix: str = "gridsql_search"):
        """Wrap an existing statement.

        Args:
            statement: Base SELECT statement
            bind_prefix: Prefix for generated search parameter names
        """
        self._statement = statement
        self._bind_prefix = bind_prefix
        self._bind_counter = itertools.count()

    @classmethod
    def for_table(cls, table: str) -> "SqlAlchemyQuery":
        """Create ``SELECT table.* FROM table``."""
        validate_identifier(table, "table", allow_qualified=True)
        statement = select(literal_column(f"{table}.*")).select_from(text(table))
        return cls(statement)

    @property
    def statement(self) -> Select:
        return self._statement

    def add_equality_condition(self, column_ref: str, value: Any) -> None:
        self._statement = self._statement.where(literal_column(column_ref) == value)

    def add_comparison_condition(self, column_ref: str, operator: str, value: Any) -> None:
        """AND ``column_ref >= value`` or ``column_ref <= value``.

        Raises:
            ValueError: For any other operator
        """
        compare = _COMPARISONS.get(operator)
        if compare is None:
            raise invalid_argument_error(
                f"Unsupported comparison operator: {operator}. "
                f"Supported: {', '.join(_COMPARISONS)}"
            )
        self._statement = self._statement.where(compare(literal_column(column_ref), value))

    def add_null_condition(self, column_ref: str, is_null: bool) -> None:
        column = literal_column(column_ref)
        condition = column.is_(None) if is_null else column.is_not(None)
        self._statement = self._statement.where(condition)

    def add_disjunction(self, branches: Sequence[DisjunctionBranch]) -> None:
        """AND ``(branch OR branch ...)`` into the statement.

        Args:
            branches: ``(template, value)`` pairs; the last placeholder in
                each template is replaced by a uniquely named bind parameter

        Raises:
            ValueError: If a template has no placeholder
        """
        if not branches:
            return

        clauses = []
        for template, value in branches:
            head, sep, tail = template.rpartition(self.placeholder)
            if not sep:
                raise invalid_argument_error(f"Predicate has no '{self.placeholder}' placeholder: {template}")
            name = f"{self._bind_prefix}_{next(self._bind_counter)}"
            clause = text(f"{_escape_colons(head)}:{name}{_escape_colons(tail)}")
            clauses.append(clause.bindparams(bindparam(name, value)))

        self._statement = self._statement.where(or_(*clauses))

    def set_projection(self, items: List[ProjectionItem]) -> None:
        columns = [
            literal_column(expression) if alias is None else literal_column(expression).label(alias)
            for expression, alias in items
        ]
        self._statement = self._statement.with_only_columns(*columns)


def driver_for_engine(bind: Union[Engine, Connection]) -> str:
    """Get the dialect registry driver name for an Engine or Connection.

    SQLAlchemy calls PostgreSQL "postgresql"; the registry calls it "pgsql".
    Other dialect names are used unchanged.
    """
    name = bind.dialect.name
    return SQLALCHEMY_DIALECT_ALIASES.get(name, name)


def builder_for_engine(
    bind: Union[Engine, Connection],
    table: str,
    settings: Optional[GridSettings] = None,
) -> DatatableQueryBuilder:
    """Create a DatatableQueryBuilder for the engine's dialect.

    Args:
        bind: Engine or Connection
        table: Main table name
        settings: Settings override

    Returns:
        DatatableQueryBuilder

    Raises:
        UnsupportedDialectError: If no grammar is registered for the dialect
    """
    driver = driver_for_engine(bind)
    logger.debug(f"Resolved driver '{driver}' from SQLAlchemy dialect '{bind.dialect.name}'")
    return DatatableQueryBuilder(table, driver=driver, settings=settings)
