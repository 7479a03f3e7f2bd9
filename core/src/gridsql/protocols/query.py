"""Query-handle protocol definitions.

The filter composer and the query assembler never build or execute a
query themselves. They drive an external, mutable query object through
the narrow interface defined here, so any query layer (SQLAlchemy, an ORM,
a hand-rolled builder) can be plugged in by implementing five methods.
"""

from typing import Any, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

# (raw predicate template, bound value)
DisjunctionBranch = Tuple[str, Any]

# (SQL expression, alias or None for an unaliased expression such as ``table.*``)
ProjectionItem = Tuple[str, Optional[str]]


@runtime_checkable
class QueryHandle(Protocol):
    """Protocol defining the mutable query handle gridsql writes into.

    Every value-bearing method must bind its value as a query parameter.
    Implementations must never interpolate values into SQL text.

    Attributes:
        placeholder: Token that stands for a bound value inside the raw
            predicate templates passed to ``add_disjunction``.
    """

    placeholder: str

    def add_equality_condition(self, column_ref: str, value: Any) -> None:
        """AND ``column_ref = :value`` into the query."""
        ...

    def add_comparison_condition(self, column_ref: str, operator: str, value: Any) -> None:
        """AND ``column_ref <operator> :value`` where operator is ``>=`` or ``<=``."""
        ...

    def add_null_condition(self, column_ref: str, is_null: bool) -> None:
        """AND ``column_ref IS NULL`` (or ``IS NOT NULL`` when is_null is False)."""
        ...

    def add_disjunction(self, branches: Sequence[DisjunctionBranch]) -> None:
        """AND one parenthesized group ``(t1 OR t2 ...)`` into the query.

        Each template contains one placeholder bound to its paired value.
        """
        ...

    def set_projection(self, items: List[ProjectionItem]) -> None:
        """Replace the SELECT list with ``expression [AS alias]`` items."""
        ...
