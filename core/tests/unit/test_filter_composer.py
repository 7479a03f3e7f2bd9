"""Unit tests for the filter composer."""

import pytest

from gridsql.filters import (
    FilterState,
    apply_exact_filters,
    apply_null_filter,
    apply_range_filter,
    filter_state,
    loosely_equals_one,
)


class TestFilterState:
    """Test three-state presence detection."""

    @pytest.mark.parametrize(
        "filters, expected",
        [
            ({}, FilterState.ABSENT),
            ({"k": None}, FilterState.ABSENT),
            ({"k": ""}, FilterState.EMPTY),
            ({"k": False}, FilterState.EMPTY),
            ({"k": "0"}, FilterState.REQUESTED),
            ({"k": 0}, FilterState.REQUESTED),
            ({"k": " "}, FilterState.REQUESTED),
            ({"k": "abc"}, FilterState.REQUESTED),
        ],
    )
    def test_states(self, filters, expected):
        assert filter_state(filters, "k") is expected


class TestLooselyEqualsOne:
    """Test loose equality to 1."""

    @pytest.mark.parametrize("value", [1, 1.0, "1", " 1 ", "1.0", True])
    def test_truthy(self, value):
        assert loosely_equals_one(value)

    @pytest.mark.parametrize("value", [0, "0", "2", "yes", "", False, None, [1]])
    def test_falsy(self, value):
        assert not loosely_equals_one(value)


class TestRangeFilter:
    """Test from/to range filters."""

    def test_both_bounds(self, query):
        filters = {"tanggal_lahir_dari": "2020-01-01", "tanggal_lahir_sampai": "2020-12-31"}
        apply_range_filter(query, filters, "peserta", "tanggal_lahir")

        assert query.calls == [
            ("cmp", ("peserta.tanggal_lahir", ">=", "2020-01-01")),
            ("cmp", ("peserta.tanggal_lahir", "<=", "2020-12-31")),
        ]

    def test_lower_only(self, query):
        apply_range_filter(query, {"umur_dari": "18"}, "peserta", "umur")
        assert query.calls == [("cmp", ("peserta.umur", ">=", "18"))]

    def test_zero_is_a_bound(self, query):
        apply_range_filter(query, {"umur_dari": "0", "umur_sampai": 0}, "peserta", "umur")
        assert len(query.of_kind("cmp")) == 2

    def test_empty_bounds_ignored(self, query):
        apply_range_filter(query, {"umur_dari": "", "umur_sampai": None}, "peserta", "umur")
        assert query.calls == []

    def test_db_column_override(self, query):
        apply_range_filter(query, {"tgl_dari": "2020"}, "peserta", "tgl", "detail.tanggal")
        assert query.calls == [("cmp", ("detail.tanggal", ">=", "2020"))]

    def test_invalid_db_column(self, query):
        with pytest.raises(ValueError):
            apply_range_filter(query, {}, "peserta", "tgl", "detail.tanggal; --")

    def test_returns_query(self, query):
        assert apply_range_filter(query, {}, "peserta", "umur") is query


class TestExactFilters:
    """Test equality filters."""

    def test_only_requested_columns(self, query):
        filters = {"status": "aktif", "kota": "", "jenis": "0"}
        apply_exact_filters(query, filters, "peserta", ["status", "kota", "jenis", "missing"])

        assert query.calls == [
            ("eq", ("peserta.status", "aktif")),
            ("eq", ("peserta.jenis", "0")),
        ]

    def test_value_is_not_interpolated(self, query):
        apply_exact_filters(query, {"nama": "x' OR '1'='1"}, "peserta", ["nama"])
        assert query.calls == [("eq", ("peserta.nama", "x' OR '1'='1"))]

    def test_invalid_column(self, query):
        with pytest.raises(ValueError):
            apply_exact_filters(query, {}, "peserta", ["a b"])


class TestNullFilter:
    """Test NULL / NOT NULL filters."""

    @pytest.mark.parametrize("value", ["1", 1, " 1", True])
    def test_one_means_not_null(self, query, value):
        apply_null_filter(query, {"ada_nib": value}, "peserta", "nib", "ada_nib")
        assert query.calls == [("null", ("peserta.nib", False))]

    @pytest.mark.parametrize("value", ["0", 0, "2", "no"])
    def test_other_values_mean_null(self, query, value):
        apply_null_filter(query, {"ada_nib": value}, "peserta", "nib", "ada_nib")
        assert query.calls == [("null", ("peserta.nib", True))]

    @pytest.mark.parametrize("filters", [{}, {"ada_nib": None}, {"ada_nib": ""}, {"ada_nib": False}])
    def test_absent_or_empty_adds_nothing(self, query, filters):
        apply_null_filter(query, filters, "peserta", "nib", "ada_nib")
        assert query.calls == []
