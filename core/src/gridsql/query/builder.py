"""Datatable query builder.

One builder covers one query-construction lifecycle:

    construct -> register columns -> apply filters -> assemble -> discard

The grammar is resolved once, at construction, before anything else
happens. An unknown driver therefore fails fast with
UnsupportedDialectError and never leaves a half-built builder behind.
Builders are not shared between requests and hold no global state besides
the grammar they resolved.

Example:
    >>> dt = datatable_builder("peserta", driver="pgsql")
    >>> dt.add_date("created_at", "%d-%b-%Y", "created")
    >>> dt.add_bool("blokir", "Ya", "Tidak")
    >>> query = SqlAlchemyQuery.for_table("peserta")
    >>> dt.build_select(query)
    >>> dt.apply_exact_filters(query, params.filters, ["status"])
    >>> dt.apply_global_search(query, params.search, ["nama", "email"])
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from gridsql.columns import ColumnRegistry
from gridsql.filters import apply_exact_filters, apply_null_filter, apply_range_filter
from gridsql.grammar.base import BaseGrammar
from gridsql.grammar.registry import DialectRegistry, get_dialect_registry
from gridsql.logging import get_logger, set_request_context
from gridsql.protocols import ProjectionItem, QueryHandle
from gridsql.query.assembler import apply_global_search, apply_projection, build_projection
from gridsql.query.params import DatatableParams
from gridsql.settings import GridSettings, get_settings
from gridsql.types import ColumnEntry


logger = get_logger(__name__)


class DatatableQueryBuilder:
    """Fluent builder for server-side datatable queries.

    Computed columns are registered as raw SQL expressions selected under
    an alias, so the grid can sort and search on them like stored columns.
    Every expression is rendered by the grammar of the active driver.

    Attributes:
        table: Main table name
    """

    def __init__(
        self,
        table: str,
        driver: Optional[str] = None,
        grammar: Optional[BaseGrammar] = None,
        settings: Optional[GridSettings] = None,
        registry: Optional[DialectRegistry] = None,
    ):
        """Initialize the builder.

        Args:
            table: Main table name, optionally schema-qualified
            driver: Database driver name; defaults to settings.default_driver
            grammar: Grammar override; skips registry resolution entirely
            settings: Settings override; defaults to get_settings()
            registry: Dialect registry override; defaults to the global one

        Raises:
            UnsupportedDialectError: If no grammar is given and the driver
                cannot be resolved
            GridValidationError: If table is not a valid identifier
        """
        self._settings = settings or get_settings()
        if grammar is None:
            registry = registry or get_dialect_registry()
            grammar = registry.resolve(driver or self._settings.default_driver)

        query_settings = self._settings.query
        self._columns = ColumnRegistry(
            table,
            grammar,
            strict_date_formats=query_settings.strict_date_formats,
            true_tag=query_settings.bool_true_tag,
            false_tag=query_settings.bool_false_tag,
        )
        self.table = self._columns.table
        set_request_context(table=self.table, driver=grammar.driver_name)
        logger.debug(f"Datatable builder for '{self.table}' using {grammar.__class__.__name__}")

    # ------------------------------------------------------------------
    # Column builders
    # ------------------------------------------------------------------

    def add_date(self, column: str, date_format: str, alias: str) -> "DatatableQueryBuilder":
        """Add a formatted date column (canonical format, e.g. '%d-%b-%Y')."""
        self._columns.add_date(column, date_format, alias)
        return self

    def add_bool(
        self,
        column: str,
        true_text: str,
        false_text: str,
        true_tag: Optional[str] = None,
        false_tag: Optional[str] = None,
    ) -> "DatatableQueryBuilder":
        """Add ``{column}_str`` and ``{column}_class`` for a boolean column."""
        self._columns.add_bool(column, true_text, false_text, true_tag, false_tag)
        return self

    def add_file(self, alias: str, base_url: str, source_column: str, default_url: str) -> "DatatableQueryBuilder":
        """Add a file link that falls back to ``default_url`` when NULL."""
        self._columns.add_file(alias, base_url, source_column, default_url)
        return self

    def add_concat(self, alias: str, prefix: str, column: str) -> "DatatableQueryBuilder":
        self._columns.add_concat(alias, prefix, column)
        return self

    def add_alias(self, alias: str, expression: str) -> "DatatableQueryBuilder":
        """Add a joined-table column under an alias."""
        self._columns.add_alias(alias, expression)
        return self

    def add_raw(self, alias: str, expression: str, searchable: bool = True) -> "DatatableQueryBuilder":
        """Add a raw SQL expression.

        The expression must already be valid for the active driver; use
        ``builder.grammar`` to build dialect-aware fragments.
        """
        self._columns.add_raw(alias, expression, searchable)
        return self

    # ------------------------------------------------------------------
    # Filter helpers
    # ------------------------------------------------------------------

    def apply_range_filter(
        self,
        query: QueryHandle,
        filters: Mapping[str, Any],
        column: str,
        db_column: Optional[str] = None,
    ) -> "DatatableQueryBuilder":
        """Apply ``{column}_dari`` / ``{column}_sampai`` bounds."""
        apply_range_filter(query, filters, self.table, column, db_column)
        return self

    def apply_exact_filters(
        self,
        query: QueryHandle,
        filters: Mapping[str, Any],
        columns: Iterable[str],
    ) -> "DatatableQueryBuilder":
        apply_exact_filters(query, filters, self.table, columns)
        return self

    def apply_null_filter(
        self,
        query: QueryHandle,
        filters: Mapping[str, Any],
        column: str,
        filter_param: str,
    ) -> "DatatableQueryBuilder":
        """Apply ``IS NOT NULL`` when filter_param is 1, ``IS NULL`` otherwise."""
        apply_null_filter(query, filters, self.table, column, filter_param)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build_projection(self) -> List[ProjectionItem]:
        """Get ``table.*`` plus every computed column, in registration order."""
        return build_projection(self._columns)

    def build_select(self, query: QueryHandle) -> QueryHandle:
        """Set the query's SELECT list to the builder projection."""
        return apply_projection(query, self._columns)

    def apply_global_search(
        self,
        query: QueryHandle,
        search_text: Optional[str],
        default_searchable: Iterable[str] = (),
    ) -> QueryHandle:
        """AND the global search over computed and default-searchable columns.

        Args:
            query: Query handle, already filtered
            search_text: Raw search text; None or "" adds nothing
            default_searchable: Base-table columns searched by default
                (typically the model's fillable columns)

        Returns:
            The query handle
        """
        return apply_global_search(
            query,
            self._columns,
            search_text,
            default_searchable,
            wildcard=self._settings.query.search_wildcard,
        )

    def apply_params(
        self,
        query: QueryHandle,
        params: DatatableParams,
        default_searchable: Iterable[str] = (),
    ) -> QueryHandle:
        """Project the query and apply the request's global search.

        Column filters are query-specific and are applied separately with
        the ``apply_*_filter`` helpers, before or after this call.
        """
        self.build_select(query)
        return self.apply_global_search(query, params.search, default_searchable)

    def parse_params(self, params: Mapping[str, Any]) -> DatatableParams:
        """Parse request parameters using the configured parameter names."""
        query_settings = self._settings.query
        return DatatableParams.from_mapping(
            params,
            search_key=query_settings.search_param,
            filter_key=query_settings.filter_param,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def grammar(self) -> BaseGrammar:
        """Grammar of the active driver, for building custom expressions."""
        return self._columns.grammar

    @property
    def driver_name(self) -> str:
        return self._columns.grammar.driver_name

    @property
    def columns(self) -> Dict[str, str]:
        """Alias -> expression for every registered column."""
        return self._columns.columns

    @property
    def entries(self) -> List[ColumnEntry]:
        return self._columns.entries

    @property
    def searchable_aliases(self) -> List[str]:
        return self._columns.searchable_aliases


def datatable_builder(
    table: str,
    driver: Optional[str] = None,
    grammar: Optional[BaseGrammar] = None,
    settings: Optional[GridSettings] = None,
) -> DatatableQueryBuilder:
    """Create a DatatableQueryBuilder.

    Args:
        table: Main table name
        driver: Database driver name (defaults to GRIDSQL_DEFAULT_DRIVER)
        grammar: Grammar override
        settings: Settings override

    Returns:
        New builder instance
    """
    return DatatableQueryBuilder(table, driver=driver, grammar=grammar, settings=settings)
