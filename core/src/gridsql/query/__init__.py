"""Query assembly for server-side datatables.

Architecture:
    - assembler.py: projection and global-search disjunction
    - builder.py: DatatableQueryBuilder facade (registry + filters + assembler)
    - params.py: DatatableParams, normalized request parameters
    - alchemy.py: QueryHandle implementation on a SQLAlchemy Select
"""

from gridsql.query.assembler import (
    apply_global_search,
    apply_projection,
    build_projection,
    build_search_branches,
    wrap_search_text,
)
from gridsql.query.builder import DatatableQueryBuilder, datatable_builder
from gridsql.query.params import DatatableParams
from gridsql.query.alchemy import SqlAlchemyQuery, builder_for_engine, driver_for_engine

__all__ = [
    "DatatableQueryBuilder",
    "datatable_builder",
    "DatatableParams",
    "SqlAlchemyQuery",
    "builder_for_engine",
    "driver_for_engine",
    "build_projection",
    "apply_projection",
    "build_search_branches",
    "apply_global_search",
    "wrap_search_text",
]
