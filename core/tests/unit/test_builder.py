"""Unit tests for DatatableQueryBuilder."""

from unittest.mock import patch

import pytest

from gridsql.common.exceptions import DateFormatError, UnsupportedDialectError
from gridsql.grammar import DialectRegistry, MySqlGrammar, PostgresGrammar, register_grammar
from gridsql.logging.filters import driver_var, table_var
from gridsql.query import DatatableParams, DatatableQueryBuilder, datatable_builder
from gridsql.settings import GridSettings, QuerySettings


class TestConstruction:
    """Test grammar resolution at construction."""

    def test_explicit_driver(self, settings):
        builder = DatatableQueryBuilder("peserta", driver="pgsql", settings=settings)
        assert isinstance(builder.grammar, PostgresGrammar)
        assert builder.driver_name == "pgsql"
        assert builder.table == "peserta"

    def test_default_driver_from_settings(self, settings):
        builder = DatatableQueryBuilder("peserta", settings=settings)
        assert isinstance(builder.grammar, MySqlGrammar)

    def test_explicit_grammar_skips_registry(self, settings):
        grammar = PostgresGrammar()
        builder = DatatableQueryBuilder("peserta", driver="unknown", grammar=grammar, settings=settings)
        assert builder.grammar is grammar

    def test_unknown_driver_fails_fast(self, settings):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DatatableQueryBuilder("peserta", driver="oracle", settings=settings)
        assert exc_info.value.driver == "oracle"

    def test_no_driver_configured(self, settings):
        settings.default_driver = None
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DatatableQueryBuilder("peserta", settings=settings)
        assert exc_info.value.driver is None

    def test_custom_registry(self, settings):
        registry = DialectRegistry(builtins={"pg": PostgresGrammar})
        builder = DatatableQueryBuilder("peserta", driver="pg", settings=settings, registry=registry)
        assert isinstance(builder.grammar, PostgresGrammar)

    def test_custom_grammar_from_global_registry(self, settings):
        class ShoutingGrammar(MySqlGrammar):
            @property
            def driver_name(self):
                return "shout"

        register_grammar("shout", ShoutingGrammar)
        builder = datatable_builder("peserta", driver="shout", settings=settings)
        assert builder.driver_name == "shout"

    @patch("gridsql.query.builder.get_settings")
    def test_uses_global_settings_by_default(self, mock_get_settings, settings):
        mock_get_settings.return_value = settings
        builder = DatatableQueryBuilder("peserta")
        mock_get_settings.assert_called_once()
        assert builder.driver_name == "mysql"

    def test_sets_logging_context(self, settings):
        DatatableQueryBuilder("peserta", driver="pgsql", settings=settings)

        assert table_var.get() == "peserta"
        assert driver_var.get() == "pgsql"

    def test_failed_resolution_leaves_logging_context(self, settings):
        with pytest.raises(UnsupportedDialectError):
            DatatableQueryBuilder("peserta", driver="oracle", settings=settings)

        assert table_var.get() is None
        assert driver_var.get() is None


class TestColumns:
    """Test fluent column registration."""

    def test_chaining_and_order(self, settings):
        builder = (
            datatable_builder("peserta", driver="mysql", settings=settings)
            .add_date("created_at", "%d-%b-%Y", "created")
            .add_bool("blokir", "Ya", "Tidak")
            .add_file("ktp_link", "http://x/", "peserta.ktp", "http://x/none.png")
            .add_concat("compro_link", "http://x/", "peserta.compro")
            .add_alias("provinsi", "prov.name")
            .add_raw("umur", "TIMESTAMPDIFF(YEAR, peserta.lahir, NOW())", searchable=False)
        )

        assert list(builder.columns) == [
            "created", "blokir_str", "blokir_class", "ktp_link", "compro_link", "provinsi", "umur",
        ]
        assert "umur" not in builder.searchable_aliases
        assert [entry.alias for entry in builder.entries] == list(builder.columns)

    def test_bool_tags_from_settings(self, settings):
        settings.query.bool_true_tag = "green"
        builder = datatable_builder("peserta", driver="mysql", settings=settings).add_bool("a", "Y", "N")
        assert builder.columns["a_class"] == "(IF(peserta.a = 1, 'green', 'danger'))"

    def test_strict_date_formats_from_settings(self, settings):
        settings.query.strict_date_formats = True
        builder = datatable_builder("peserta", driver="pgsql", settings=settings)
        with pytest.raises(DateFormatError):
            builder.add_date("d", "%Q", "x")

    def test_grammar_available_for_raw_expressions(self, settings):
        builder = datatable_builder("peserta", driver="pgsql", settings=settings)
        expression = builder.grammar.if_null("peserta.nama", "'-'")
        builder.add_raw("nama_or_dash", expression)
        assert builder.columns["nama_or_dash"] == "COALESCE(peserta.nama, '-')"


class TestFiltersAndSearch:
    """Test end-to-end assembly against a recording query."""

    def test_full_request(self, query, settings):
        builder = (
            datatable_builder("peserta", driver="mysql", settings=settings)
            .add_bool("blokir", "Ya", "Tidak")
        )
        filters = {"status": "1", "umur_dari": "18", "ada_nib": "0"}

        builder.build_select(query)
        builder.apply_exact_filters(query, filters, ["status"])
        builder.apply_range_filter(query, filters, "umur")
        builder.apply_null_filter(query, filters, "nib", "ada_nib")
        builder.apply_global_search(query, "smith", ["nama"])

        assert [name for name, _ in query.calls] == ["select", "eq", "cmp", "null", "or"]
        assert query.of_kind("null") == [("peserta.nib", True)]
        assert len(query.of_kind("or")[0]) == 3

    def test_wildcard_from_settings(self, query, settings):
        settings.query.search_wildcard = "*"
        builder = datatable_builder("peserta", driver="mysql", settings=settings)
        builder.apply_global_search(query, "smith", ["nama"])
        assert query.of_kind("or")[0] == [("peserta.nama LIKE ?", "*smith*")]

    def test_apply_params(self, query, settings):
        builder = datatable_builder("peserta", driver="mysql", settings=settings)
        params = DatatableParams(search="smith")

        builder.apply_params(query, params, ["nama"])

        assert [name for name, _ in query.calls] == ["select", "or"]

    def test_apply_params_without_search(self, query, settings):
        builder = datatable_builder("peserta", driver="mysql", settings=settings)
        builder.apply_params(query, DatatableParams(), ["nama"])
        assert [name for name, _ in query.calls] == ["select"]

    def test_parse_params_uses_configured_keys(self, settings):
        settings.query = QuerySettings.model_construct(
            strict_date_formats=False,
            search_wildcard="%",
            bool_true_tag="success",
            bool_false_tag="danger",
            search_param="q",
            filter_param="f",
        )
        builder = datatable_builder("peserta", driver="mysql", settings=settings)
        params = builder.parse_params({"q": "smith", "f": {"status": "1"}})

        assert params.search == "smith"
        assert params.filters == {"status": "1"}

    def test_projection(self, settings):
        builder = datatable_builder("peserta", driver="pgsql", settings=settings).add_alias("p", "prov.name")
        assert builder.build_projection() == [("peserta.*", None), ("prov.name", "p")]

    def test_builders_are_independent(self, settings):
        first = datatable_builder("a", driver="mysql", settings=settings).add_raw("x", "1")
        second = datatable_builder("b", driver="pgsql", settings=settings)
        assert "x" not in second.columns
        assert first.grammar is not second.grammar


class TestSettingsIntegration:
    """Test construction with real settings."""

    def test_default_driver_from_environment(self, monkeypatch):
        monkeypatch.setenv("GRIDSQL_DEFAULT_DRIVER", "PGSQL")
        builder = DatatableQueryBuilder("peserta", settings=GridSettings())
        assert builder.driver_name == "pgsql"
