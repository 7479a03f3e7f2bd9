"""Shared fixtures for gridsql tests."""

from typing import Any, List, Tuple

import pytest

from gridsql.grammar import MySqlGrammar, PostgresGrammar, get_dialect_registry
from gridsql.logging import clear_request_context
from gridsql.settings import GridSettings, QuerySettings


class RecordingQuery:
    """QueryHandle fake that records every call in order."""

    placeholder = "?"

    def __init__(self):
        self.calls: List[Tuple[str, Any]] = []

    def add_equality_condition(self, column_ref, value):
        self.calls.append(("eq", (column_ref, value)))

    def add_comparison_condition(self, column_ref, operator, value):
        self.calls.append(("cmp", (column_ref, operator, value)))

    def add_null_condition(self, column_ref, is_null):
        self.calls.append(("null", (column_ref, is_null)))

    def add_disjunction(self, branches):
        self.calls.append(("or", list(branches)))

    def set_projection(self, items):
        self.calls.append(("select", list(items)))

    def of_kind(self, kind: str) -> List[Any]:
        return [args for name, args in self.calls if name == kind]


@pytest.fixture
def query():
    return RecordingQuery()


@pytest.fixture
def mysql():
    return MySqlGrammar()


@pytest.fixture
def pgsql():
    return PostgresGrammar()


@pytest.fixture
def settings():
    """Settings built explicitly so the environment cannot leak in."""
    return GridSettings.model_construct(
        default_driver="mysql",
        log_level="INFO",
        query=QuerySettings.model_construct(
            strict_date_formats=False,
            search_wildcard="%",
            bool_true_tag="success",
            bool_false_tag="danger",
            search_param="search",
            filter_param="filter",
        ),
    )


@pytest.fixture(autouse=True)
def reset_dialect_registry():
    """Drop grammars registered by a test."""
    yield
    get_dialect_registry().reset()


@pytest.fixture(autouse=True)
def reset_request_context():
    """Drop table and driver context left behind by builders."""
    yield
    clear_request_context()
