"""Filter composer.

Stateless functions translating a filter-parameter map into conditions on
a query handle. Filter values always travel as bound parameters.

Presence Rules:
    A filter value is in one of three states:
        - absent: the key is missing or its value is None
        - empty: the value is "" or False
        - requested: anything else, including "0" and 0

    Absent and empty values never add a condition.
"""

from enum import Enum
from numbers import Number
from typing import Any, Iterable, Mapping, Optional

from gridsql.constants import ComparisonOperator, RANGE_LOWER_SUFFIX, RANGE_UPPER_SUFFIX
from gridsql.logging import get_logger
from gridsql.protocols import QueryHandle
from gridsql.utils import qualify, validate_identifier


logger = get_logger(__name__)


class FilterState(str, Enum):
    """Presence state of one filter value."""

    ABSENT = "absent"
    EMPTY = "empty"
    REQUESTED = "requested"


def filter_state(filters: Mapping[str, Any], key: str) -> FilterState:
    """Classify the value stored under ``key``.

    Args:
        filters: Filter-parameter map
        key: Parameter name

    Returns:
        FilterState of the value
    """
    value = filters.get(key)
    if value is None:
        return FilterState.ABSENT
    if value is False or (isinstance(value, str) and value == ""):
        return FilterState.EMPTY
    return FilterState.REQUESTED


def is_requested(filters: Mapping[str, Any], key: str) -> bool:
    return filter_state(filters, key) is FilterState.REQUESTED


def loosely_equals_one(value: Any) -> bool:
    """Check whether a request value means "1".

    Accepts True, numbers equal to 1 and strings that parse to 1 once
    stripped ("1", " 1 ", "1.0").
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, Number):
        return value == 1
    if isinstance(value, str):
        try:
            return float(value.strip()) == 1
        except ValueError:
            return False
    return False


def apply_range_filter(
    query: QueryHandle,
    filters: Mapping[str, Any],
    table: str,
    column: str,
    db_column: Optional[str] = None,
) -> QueryHandle:
    """Apply an inclusive from/to range filter.

    Reads ``{column}_dari`` as the lower bound (``>=``) and
    ``{column}_sampai`` as the upper bound (``<=``). Each bound is applied
    independently; there is no BETWEEN merge.

    Args:
        query: Query handle
        filters: Filter-parameter map
        table: Main table name
        column: Filter column name (e.g., 'tanggal_lahir')
        db_column: Full column reference override (default: table.column)

    Returns:
        The query handle
    """
    validate_identifier(column, "column")
    if db_column is not None:
        validate_identifier(db_column, "column", allow_qualified=True)
    column_ref = db_column or qualify(table, column)

    lower_key = f"{column}{RANGE_LOWER_SUFFIX}"
    upper_key = f"{column}{RANGE_UPPER_SUFFIX}"

    if is_requested(filters, lower_key):
        query.add_comparison_condition(column_ref, ComparisonOperator.GREATER_OR_EQUAL.value, filters[lower_key])
        logger.debug(f"Range filter: {column_ref} >= {lower_key}")

    if is_requested(filters, upper_key):
        query.add_comparison_condition(column_ref, ComparisonOperator.LESS_OR_EQUAL.value, filters[upper_key])
        logger.debug(f"Range filter: {column_ref} <= {upper_key}")

    return query


def apply_exact_filters(
    query: QueryHandle,
    filters: Mapping[str, Any],
    table: str,
    columns: Iterable[str],
) -> QueryHandle:
    """Apply equality filters for several columns.

    For each requested column, adds ``table.column = :value``.

    Args:
        query: Query handle
        filters: Filter-parameter map
        table: Main table name
        columns: Filter column names, each also a key in ``filters``

    Returns:
        The query handle
    """
    for column in columns:
        validate_identifier(column, "column")
        if is_requested(filters, column):
            query.add_equality_condition(qualify(table, column), filters[column])
            logger.debug(f"Exact filter: {table}.{column}")

    return query


def apply_null_filter(
    query: QueryHandle,
    filters: Mapping[str, Any],
    table: str,
    column: str,
    filter_param: str,
) -> QueryHandle:
    """Apply a NULL / NOT NULL filter.

    A value loosely equal to 1 selects ``IS NOT NULL``; any other requested
    value selects ``IS NULL``; absent or empty values add nothing.

    Args:
        query: Query handle
        filters: Filter-parameter map
        table: Main table name
        column: Column in the main table (e.g., 'nib')
        filter_param: Parameter name (e.g., 'ada_nib')

    Returns:
        The query handle
    """
    validate_identifier(column, "column")
    if not is_requested(filters, filter_param):
        return query

    column_ref = qualify(table, column)
    is_null = not loosely_equals_one(filters[filter_param])
    query.add_null_condition(column_ref, is_null)
    logger.debug(f"Null filter: {column_ref} IS {'NULL' if is_null else 'NOT NULL'}")
    return query
