"""Query assembler.

Builds the projection (``table.*`` plus every computed column) and the
global-search predicate from a column registry, and writes both into a
query handle.

Search Semantics:
    The search text is user input. It is bound as a parameter in every
    branch and is never interpolated into SQL. All branches share one
    wildcarded value; there is no per-branch transformation.
"""

from typing import Iterable, List, Optional

from gridsql.columns import ColumnRegistry
from gridsql.constants import DEFAULT_PLACEHOLDER
from gridsql.logging import get_logger
from gridsql.protocols import DisjunctionBranch, ProjectionItem, QueryHandle
from gridsql.utils import qualify, traced, validate_identifier


logger = get_logger(__name__)


def build_projection(registry: ColumnRegistry) -> List[ProjectionItem]:
    """Build the SELECT list for a registry.

    Args:
        registry: Column registry

    Returns:
        ``[("table.*", None), (expression, alias), ...]`` in registration order
    """
    items: List[ProjectionItem] = [(f"{registry.table}.*", None)]
    items.extend((entry.expression, entry.alias) for entry in registry.entries)
    return items


@traced(
    "gridsql.query.projection",
    attribute_getter=lambda query, registry: {
        "gridsql.table": registry.table,
        "gridsql.columns": len(registry),
    },
)
def apply_projection(query: QueryHandle, registry: ColumnRegistry) -> QueryHandle:
    """Replace the query's SELECT list with the registry projection.

    Args:
        query: Query handle
        registry: Column registry

    Returns:
        The query handle
    """
    query.set_projection(build_projection(registry))
    return query


def wrap_search_text(search_text: str, wildcard: str = "%") -> str:
    """Wrap search text in wildcards, e.g. ``smith`` -> ``%smith%``."""
    return f"{wildcard}{search_text}{wildcard}"


def build_search_branches(
    registry: ColumnRegistry,
    search_text: str,
    default_searchable: Iterable[str] = (),
    placeholder: str = DEFAULT_PLACEHOLDER,
    wildcard: str = "%",
) -> List[DisjunctionBranch]:
    """Build the pattern-match branches of the global search.

    Branches come first for searchable computed columns (matched on their
    expression, since a WHERE clause cannot reference select aliases), then
    for the default-searchable base columns, qualified with the table
    unless already qualified. There is one branch per target, even when
    two targets render the same predicate.

    Args:
        registry: Column registry
        search_text: Raw search text
        default_searchable: Base-table columns searched by default
        placeholder: Bound parameter token for ``grammar.like``
        wildcard: Wildcard wrapped around the search text

    Returns:
        ``[(predicate, "%text%"), ...]``
    """
    grammar = registry.grammar
    value = wrap_search_text(search_text, wildcard)

    targets: List[str] = [registry.get(alias).expression for alias in registry.searchable_aliases]
    for column in default_searchable:
        validate_identifier(column, "column", allow_qualified=True)
        targets.append(qualify(registry.table, column))

    return [(grammar.like(target, placeholder), value) for target in targets]


@traced(
    "gridsql.query.global_search",
    attribute_getter=lambda query, registry, search_text, *args, **kwargs: {
        "gridsql.table": registry.table,
        "gridsql.search.active": bool(search_text),
    },
)
def apply_global_search(
    query: QueryHandle,
    registry: ColumnRegistry,
    search_text: Optional[str],
    default_searchable: Iterable[str] = (),
    wildcard: str = "%",
) -> QueryHandle:
    """AND a global-search disjunction into the query.

    ``None`` or an empty string is a no-op: the query is returned untouched
    and the row set is unaffected. Any other text, including "0" and
    whitespace, is searched as-is.

    Args:
        query: Query handle, already filtered
        registry: Column registry
        search_text: Raw search text
        default_searchable: Base-table columns searched by default
        wildcard: Wildcard wrapped around the search text

    Returns:
        The query handle
    """
    if search_text is None or search_text == "":
        return query

    placeholder = getattr(query, "placeholder", DEFAULT_PLACEHOLDER)
    branches = build_search_branches(
        registry,
        str(search_text),
        default_searchable,
        placeholder=placeholder,
        wildcard=wildcard,
    )
    if not branches:
        logger.debug(f"Global search on '{registry.table}' has no searchable columns; skipped")
        return query

    query.add_disjunction(branches)
    logger.debug(f"Global search on '{registry.table}' across {len(branches)} column(s)")
    return query
