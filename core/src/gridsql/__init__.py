from gridsql.__version__ import __version__

from gridsql.query import (
    DatatableQueryBuilder,
    DatatableParams,
    SqlAlchemyQuery,
    datatable_builder,
    builder_for_engine,
    driver_for_engine,
)

from gridsql.grammar import (
    BaseGrammar,
    MySqlGrammar,
    MariaDbGrammar,
    PostgresGrammar,
    DialectRegistry,
    get_dialect_registry,
    get_known_drivers,
    register_grammar,
    resolve_grammar,
)

from gridsql.columns import ColumnRegistry
from gridsql.protocols import QueryHandle

from gridsql.common.exceptions import (
    DateFormatError,
    ErrorCode,
    GridSQLError,
    GridValidationError,
    InvalidGrammarError,
    UnsupportedDialectError,
)

from gridsql.settings import GridSettings, get_settings


__all__ = [
    "__version__",

    "DatatableQueryBuilder",
    "DatatableParams",
    "SqlAlchemyQuery",
    "datatable_builder",
    "builder_for_engine",
    "driver_for_engine",

    "BaseGrammar",
    "MySqlGrammar",
    "MariaDbGrammar",
    "PostgresGrammar",
    "DialectRegistry",
    "get_dialect_registry",
    "get_known_drivers",
    "register_grammar",
    "resolve_grammar",

    "ColumnRegistry",
    "QueryHandle",

    # Exceptions (public API)
    "GridSQLError",
    "ErrorCode",
    "UnsupportedDialectError",
    "DateFormatError",
    "GridValidationError",
    "InvalidGrammarError",

    # Settings
    "GridSettings",
    "get_settings",
]
