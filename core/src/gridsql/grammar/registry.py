"""Dialect registry mapping driver names to grammar factories.

The registry is process-wide and read by every builder construction, while
registration is rare (typically at application startup). Writers serialize
on a lock and publish a fresh read-only snapshot; readers only dereference
the current snapshot, so they never block and never observe a half-applied
registration.
"""

import threading
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Union, Type

from gridsql.common.exceptions import (
    InvalidGrammarError,
    invalid_argument_error,
    unsupported_dialect_error,
)
from gridsql.constants import Driver
from gridsql.grammar.base import BaseGrammar
from gridsql.grammar.mysql import MariaDbGrammar, MySqlGrammar
from gridsql.grammar.postgres import PostgresGrammar
from gridsql.logging import get_logger


logger = get_logger(__name__)

GrammarFactory = Union[Type[BaseGrammar], Callable[[], BaseGrammar]]

BUILTIN_GRAMMARS: Mapping[str, GrammarFactory] = MappingProxyType({
    Driver.MYSQL.value: MySqlGrammar,
    Driver.MARIADB.value: MariaDbGrammar,
    Driver.PGSQL.value: PostgresGrammar,
})


def normalize_driver(driver_name: str) -> str:
    """Normalize a driver name for registry lookups."""
    return driver_name.strip().lower()


class DialectRegistry:
    """Registry of grammar factories keyed by database driver name.

    Example:
        >>> registry = DialectRegistry()
        >>> registry.register("sqlsrv", SqlServerGrammar)
        >>> grammar = registry.resolve("sqlsrv")
    """

    def __init__(self, builtins: Optional[Mapping[str, GrammarFactory]] = None):
        """Initialize the registry.

        Args:
            builtins: Initial registrations. Defaults to the built-in
                MySQL, MariaDB and PostgreSQL grammars.
        """
        self._builtins = dict(BUILTIN_GRAMMARS if builtins is None else builtins)
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, GrammarFactory] = MappingProxyType(dict(self._builtins))

    def register(self, driver_name: str, factory: GrammarFactory) -> None:
        """Register or replace the grammar factory for a driver.

        The last registration for a name wins. Builders already constructed
        keep the grammar they resolved.

        Args:
            driver_name: Driver identifier (e.g., 'sqlsrv')
            factory: Grammar class or zero-argument callable returning a grammar

        Raises:
            GridValidationError: If driver_name is blank (also a ValueError)
            InvalidGrammarError: If factory is not callable (also a TypeError)
        """
        if not isinstance(driver_name, str) or not driver_name.strip():
            raise invalid_argument_error("Driver name cannot be empty", field="driver_name", value=driver_name)
        if not callable(factory):
            raise InvalidGrammarError(
                driver_name,
                f"Grammar factory for '{driver_name}' must be callable, got {type(factory).__name__}",
            )

        key = normalize_driver(driver_name)
        with self._lock:
            updated: Dict[str, GrammarFactory] = dict(self._snapshot)
            replaced = key in updated
            updated[key] = factory
            self._snapshot = MappingProxyType(updated)

        name = getattr(factory, "__name__", repr(factory))
        if replaced:
            logger.info(f"Replaced grammar for driver '{key}' with {name}")
        else:
            logger.info(f"Registered grammar for driver '{key}': {name}")

    def resolve(self, driver_name: Optional[str]) -> BaseGrammar:
        """Create the grammar registered for a driver.

        Args:
            driver_name: Driver identifier; None means no driver was configured

        Returns:
            Grammar instance

        Raises:
            UnsupportedDialectError: If no grammar is registered for the driver.
                The error lists every known driver name.
            InvalidGrammarError: If the factory does not produce a BaseGrammar
        """
        snapshot = self._snapshot
        if driver_name is None:
            raise unsupported_dialect_error(None, snapshot.keys())

        key = normalize_driver(driver_name)
        factory = snapshot.get(key)
        if factory is None:
            raise unsupported_dialect_error(driver_name, snapshot.keys())

        grammar = factory()
        if not isinstance(grammar, BaseGrammar):
            raise InvalidGrammarError(
                key,
                f"Grammar factory for '{key}' returned {type(grammar).__name__}, expected a BaseGrammar"
            )
        logger.debug(f"Resolved driver '{key}' to {grammar.__class__.__name__}")
        return grammar

    def is_registered(self, driver_name: str) -> bool:
        return normalize_driver(driver_name) in self._snapshot

    def known_drivers(self) -> List[str]:
        """Get the sorted list of registered driver names."""
        return sorted(self._snapshot.keys())

    def snapshot(self) -> Mapping[str, GrammarFactory]:
        """Get a consistent read-only view of the current registrations."""
        return self._snapshot

    def reset(self) -> None:
        """Restore the initial registrations (mainly for testing)."""
        with self._lock:
            self._snapshot = MappingProxyType(dict(self._builtins))
        logger.debug("Dialect registry reset")


# Global registry instance
_global_registry = DialectRegistry()


def get_dialect_registry() -> DialectRegistry:
    """Get the process-wide dialect registry."""
    return _global_registry


def register_grammar(driver_name: str, factory: GrammarFactory) -> None:
    """Register a grammar with the global registry.

    Call this at application startup, before builders for the driver are
    constructed.

    Args:
        driver_name: Driver identifier (e.g., 'sqlsrv')
        factory: Grammar class or zero-argument callable
    """
    _global_registry.register(driver_name, factory)


def resolve_grammar(driver_name: Optional[str]) -> BaseGrammar:
    """Resolve a grammar from the global registry.

    Raises:
        UnsupportedDialectError: If the driver is not registered
    """
    return _global_registry.resolve(driver_name)


def get_known_drivers() -> List[str]:
    """Get the driver names registered with the global registry."""
    return _global_registry.known_drivers()
