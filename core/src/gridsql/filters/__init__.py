"""Filter composer: filter-parameter map -> bound query conditions."""

from gridsql.filters.composer import (
    FilterState,
    apply_exact_filters,
    apply_null_filter,
    apply_range_filter,
    filter_state,
    is_requested,
    loosely_equals_one,
)

__all__ = [
    "FilterState",
    "filter_state",
    "is_requested",
    "loosely_equals_one",
    "apply_range_filter",
    "apply_exact_filters",
    "apply_null_filter",
]
