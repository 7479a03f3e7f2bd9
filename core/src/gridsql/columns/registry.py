"""Column registry for computed columns.

Every computed column is an alias bound to a raw SQL expression. The
registry keeps them in insertion order (which is the projection order)
and tracks which of them take part in global search.

``add_raw`` is the only primitive. Every other ``add_*`` operation is one
grammar call followed by ``add_raw``, so the registry never contains
dialect syntax of its own.
"""

from typing import Dict, List, Optional

from gridsql.common.exceptions import DateFormatError, validation_error
from gridsql.constants import (
    BOOL_TAG_SUFFIX,
    BOOL_TEXT_SUFFIX,
    DEFAULT_FALSE_TAG,
    DEFAULT_TRUE_TAG,
)
from gridsql.grammar.base import BaseGrammar
from gridsql.grammar.date_format import find_unknown_tokens
from gridsql.logging import get_logger
from gridsql.types import ColumnEntry
from gridsql.utils import qualify, quote_string, validate_identifier


logger = get_logger(__name__)


class ColumnRegistry:
    """Ordered mapping of alias -> computed column.

    Duplicate aliases are not an error: registering an alias again replaces
    the earlier entry (last write wins) and the alias keeps its original
    position in the projection.

    Example:
        >>> registry = ColumnRegistry("peserta", MySqlGrammar())
        >>> registry.add_date("created_at", "%d-%b-%Y", "created")
        >>> registry.add_bool("blokir", "Ya", "Tidak")
        >>> [entry.alias for entry in registry.entries]
        ['created', 'blokir_str', 'blokir_class']
    """

    def __init__(
        self,
        table: str,
        grammar: BaseGrammar,
        *,
        strict_date_formats: bool = False,
        true_tag: str = DEFAULT_TRUE_TAG,
        false_tag: str = DEFAULT_FALSE_TAG,
    ):
        """Initialize an empty registry.

        Args:
            table: Main table name, optionally schema-qualified
            grammar: Grammar used to render expressions
            strict_date_formats: Reject date formats with unknown tokens
            true_tag: Default tag for true values in boolean columns
            false_tag: Default tag for false values in boolean columns
        """
        self._table = validate_identifier(table, "table", allow_qualified=True)
        self._grammar = grammar
        self._strict_date_formats = strict_date_formats
        self._true_tag = true_tag
        self._false_tag = false_tag
        self._entries: Dict[str, ColumnEntry] = {}

    def add_raw(self, alias: str, expression: str, searchable: bool = True) -> "ColumnRegistry":
        """Register a raw SQL expression under an alias.

        The expression is passed through verbatim; it must already be valid
        for the active dialect.

        Args:
            alias: Alias name
            expression: Raw SQL expression
            searchable: Whether the column takes part in global search

        Returns:
            The registry, for chaining

        Raises:
            ValueError: If alias is not a plain identifier or expression is empty
        """
        validate_identifier(alias, "alias")
        if not expression or not expression.strip():
            raise validation_error(f"Empty expression for alias '{alias}'", field="expression", value=alias)

        entry = ColumnEntry(alias=alias, expression=expression, searchable=searchable)
        previous = self._entries.get(alias)
        if previous is not None:
            logger.debug(
                f"Alias '{alias}' registered again on '{self._table}'; "
                f"replacing '{previous.expression}' with '{expression}'"
            )
        self._entries[alias] = entry
        return self

    def add_date(self, column: str, date_format: str, alias: str) -> "ColumnRegistry":
        """Register a formatted date column.

        Args:
            column: Column name in the main table (e.g., 'created_at')
            date_format: Canonical format (e.g., '%d-%b-%Y')
            alias: Alias for the result (e.g., 'created')

        Raises:
            DateFormatError: In strict mode, when the format has unknown tokens
        """
        if self._strict_date_formats:
            unknown = find_unknown_tokens(date_format)
            if unknown:
                raise DateFormatError(date_format, unknown)

        expression = self._grammar.date_format(self.column_ref(column), date_format)
        return self.add_raw(alias, expression)

    def add_bool(
        self,
        column: str,
        true_text: str,
        false_text: str,
        true_tag: Optional[str] = None,
        false_tag: Optional[str] = None,
    ) -> "ColumnRegistry":
        """Register the text and tag columns for a boolean column.

        Produces two entries:
          - {column}_str   : conditional(table.column = 1, true_text, false_text)
          - {column}_class : conditional(table.column = 1, true_tag, false_tag)

        Args:
            column: Boolean column in the main table (e.g., 'blokir')
            true_text: Text when true (e.g., 'Ya')
            false_text: Text when false (e.g., 'Tidak')
            true_tag: Tag when true, defaults to 'success'
            false_tag: Tag when false, defaults to 'danger'
        """
        condition = f"{self.column_ref(column)} = 1"
        true_tag = self._true_tag if true_tag is None else true_tag
        false_tag = self._false_tag if false_tag is None else false_tag

        self.add_raw(
            f"{column}{BOOL_TEXT_SUFFIX}",
            self._grammar.conditional(condition, quote_string(true_text), quote_string(false_text)),
        )
        return self.add_raw(
            f"{column}{BOOL_TAG_SUFFIX}",
            self._grammar.conditional(condition, quote_string(true_tag), quote_string(false_tag)),
        )

    def add_file(self, alias: str, base_url: str, source_column: str, default_url: str) -> "ColumnRegistry":
        """Register a file link with a fallback for missing files.

        Produces ``if_null(concat('base_url', source_column), 'default_url')``.

        Args:
            alias: Alias (e.g., 'ktp_file_link')
            base_url: Folder URL (e.g., 'http://localhost/upload/peserta/')
            source_column: Full column reference (e.g., 'peserta.ktp_file')
            default_url: URL used when the column is NULL
        """
        concat_expr = self._grammar.concat(quote_string(base_url), source_column)
        expression = self._grammar.if_null(concat_expr, quote_string(default_url))
        return self.add_raw(alias, expression)

    def add_concat(self, alias: str, prefix: str, column: str) -> "ColumnRegistry":
        """Register ``concat('prefix', column)`` with no NULL fallback.

        Args:
            alias: Alias (e.g., 'compro_link')
            prefix: Literal prefix (e.g., 'http://localhost/upload/submit/')
            column: Full column reference (e.g., 'peserta.compro')
        """
        expression = self._grammar.concat(quote_string(prefix), column)
        return self.add_raw(alias, expression)

    def add_alias(self, alias: str, expression: str) -> "ColumnRegistry":
        """Register a passthrough expression, typically a joined-table column.

        Same as ``add_raw`` with ``searchable=True``.

        Args:
            alias: Alias (e.g., 'ktp_provinsi')
            expression: Column reference (e.g., 'ktp_prov.name')
        """
        return self.add_raw(alias, expression, searchable=True)

    def column_ref(self, column: str) -> str:
        """Qualify a main-table column name with the table."""
        validate_identifier(column, "column")
        return qualify(self._table, column)

    def get(self, alias: str) -> Optional[ColumnEntry]:
        return self._entries.get(alias)

    @property
    def entries(self) -> List[ColumnEntry]:
        """All entries in projection order."""
        return list(self._entries.values())

    @property
    def columns(self) -> Dict[str, str]:
        """Alias -> expression, in projection order."""
        return {alias: entry.expression for alias, entry in self._entries.items()}

    @property
    def searchable_aliases(self) -> List[str]:
        """Aliases included in global search, in projection order."""
        return [alias for alias, entry in self._entries.items() if entry.searchable]

    @property
    def table(self) -> str:
        return self._table

    @property
    def grammar(self) -> BaseGrammar:
        return self._grammar

    def __contains__(self, alias: object) -> bool:
        return alias in self._entries

    def __len__(self) -> int:
        return len(self._entries)
