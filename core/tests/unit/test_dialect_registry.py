"""Unit tests for the dialect registry."""

import threading

import pytest

from gridsql.common.exceptions import ErrorCode, InvalidGrammarError, UnsupportedDialectError
from gridsql.grammar import (
    BUILTIN_GRAMMARS,
    DialectRegistry,
    MariaDbGrammar,
    MySqlGrammar,
    PostgresGrammar,
    get_known_drivers,
    register_grammar,
    resolve_grammar,
)


class SqlServerGrammar(MySqlGrammar):
    """Minimal custom grammar for registration tests."""

    @property
    def driver_name(self) -> str:
        return "sqlsrv"

    def like(self, column, placeholder="?"):
        return f"{column} LIKE {placeholder} COLLATE Latin1_General_CI_AI"


class TestBuiltins:
    """Test the built-in registrations."""

    def test_builtin_drivers(self):
        assert sorted(BUILTIN_GRAMMARS) == ["mariadb", "mysql", "pgsql"]

    @pytest.mark.parametrize(
        "driver, grammar_cls",
        [("mysql", MySqlGrammar), ("mariadb", MariaDbGrammar), ("pgsql", PostgresGrammar)],
    )
    def test_resolve_builtin(self, driver, grammar_cls):
        grammar = DialectRegistry().resolve(driver)
        assert type(grammar) is grammar_cls
        assert grammar.driver_name == driver

    def test_resolve_is_case_insensitive(self):
        assert isinstance(DialectRegistry().resolve(" PgSQL "), PostgresGrammar)


class TestResolveErrors:
    """Test UnsupportedDialectError."""

    def test_unknown_driver_lists_known_drivers(self):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DialectRegistry().resolve("sqlite")

        error = exc_info.value
        assert error.driver == "sqlite"
        assert error.known_drivers == ["mariadb", "mysql", "pgsql"]
        assert error.error_code is ErrorCode.UNSUPPORTED_DIALECT
        assert "[sqlite]" in error.message
        assert "mariadb, mysql, pgsql" in error.message
        assert "register_grammar()" in error.message

    def test_missing_driver(self):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DialectRegistry().resolve(None)

        assert exc_info.value.driver is None
        assert "No database driver configured" in exc_info.value.message

    def test_known_drivers_include_custom_registrations(self):
        registry = DialectRegistry()
        registry.register("sqlsrv", SqlServerGrammar)

        with pytest.raises(UnsupportedDialectError) as exc_info:
            registry.resolve("oracle")
        assert "sqlsrv" in exc_info.value.known_drivers

    def test_factory_must_return_grammar(self):
        registry = DialectRegistry()
        registry.register("broken", lambda: "not a grammar")

        with pytest.raises(TypeError) as exc_info:
            registry.resolve("broken")

        assert isinstance(exc_info.value, InvalidGrammarError)
        assert exc_info.value.error_code is ErrorCode.INVALID_GRAMMAR
        assert exc_info.value.driver == "broken"


class TestRegister:
    """Test registration semantics."""

    def test_register_custom_grammar(self):
        registry = DialectRegistry()
        registry.register("sqlsrv", SqlServerGrammar)

        assert registry.is_registered("SQLSRV")
        assert isinstance(registry.resolve("sqlsrv"), SqlServerGrammar)

    def test_last_registration_wins(self):
        registry = DialectRegistry()
        registry.register("mysql", SqlServerGrammar)
        assert isinstance(registry.resolve("mysql"), SqlServerGrammar)

    def test_callable_factory(self):
        registry = DialectRegistry()
        shared = PostgresGrammar()
        registry.register("cockroach", lambda: shared)
        assert registry.resolve("cockroach") is shared

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            DialectRegistry().register("  ", MySqlGrammar)

    def test_non_callable_rejected(self):
        with pytest.raises(InvalidGrammarError):
            DialectRegistry().register("x", MySqlGrammar())

    def test_resolved_grammar_survives_reregistration(self):
        registry = DialectRegistry()
        grammar = registry.resolve("mysql")
        registry.register("mysql", SqlServerGrammar)
        assert type(grammar) is MySqlGrammar

    def test_snapshot_is_read_only(self):
        registry = DialectRegistry()
        snapshot = registry.snapshot()
        with pytest.raises(TypeError):
            snapshot["x"] = MySqlGrammar

    def test_snapshot_is_not_affected_by_later_registration(self):
        registry = DialectRegistry()
        before = registry.snapshot()
        registry.register("sqlsrv", SqlServerGrammar)
        assert "sqlsrv" not in before
        assert "sqlsrv" in registry.snapshot()

    def test_reset_restores_builtins(self):
        registry = DialectRegistry()
        registry.register("sqlsrv", SqlServerGrammar)
        registry.reset()
        assert registry.known_drivers() == ["mariadb", "mysql", "pgsql"]

    def test_custom_builtins(self):
        registry = DialectRegistry(builtins={"mysql": MySqlGrammar})
        assert registry.known_drivers() == ["mysql"]


class TestGlobalRegistry:
    """Test module-level helpers."""

    def test_register_and_resolve(self):
        register_grammar("sqlsrv", SqlServerGrammar)
        assert "sqlsrv" in get_known_drivers()
        assert resolve_grammar("sqlsrv").driver_name == "sqlsrv"

    def test_reset_between_tests(self):
        assert "sqlsrv" not in get_known_drivers()


class TestConcurrency:
    """Test concurrent registration and resolution."""

    def test_concurrent_registrations_are_all_kept(self):
        registry = DialectRegistry()
        names = [f"custom_{i}" for i in range(50)]
        barrier = threading.Barrier(len(names))

        def register(name):
            barrier.wait()
            registry.register(name, SqlServerGrammar)

        threads = [threading.Thread(target=register, args=(name,)) for name in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        known = registry.known_drivers()
        assert all(name in known for name in names)
        assert len(known) == len(names) + 3

    def test_readers_see_whole_snapshots(self):
        registry = DialectRegistry()
        errors = []
        stop = threading.Event()

        def read():
            while not stop.is_set():
                try:
                    for driver in ("mysql", "mariadb", "pgsql"):
                        registry.resolve(driver)
                except Exception as exc:  # pragma: no cover
                    errors.append(exc)
                    return

        readers = [threading.Thread(target=read) for _ in range(4)]
        for reader in readers:
            reader.start()
        for i in range(200):
            registry.register(f"custom_{i}", SqlServerGrammar)
        stop.set()
        for reader in readers:
            reader.join()

        assert errors == []
        assert len(registry.known_drivers()) == 203
