"""Registration and lookup of production rules."""

import inspect
import logging
import threading
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from graphwire.domain import Entry, ProductionKind, ProductionRule, ResolvedValue
from graphwire.errors import (
    DuplicateNameError,
    InvalidDependencyListError,
    InvalidKindError,
    InvalidNameError,
    InvalidProducerError,
)

__all__ = ["DependencyRegistry", "inferred_name"]

logger = logging.getLogger(__name__)

_EXPECTED_PRODUCERS = {
    ProductionKind.FACTORY: "a factory function",
    ProductionKind.CONSTRUCTOR: "a constructor",
}


def inferred_name(target: Any) -> str:
    """Name a registration after its class, or after its function minus any 'make_' prefix.

    Example:
        >>> inferred_name(Engine)        # "Engine"
        >>> inferred_name(make_engine)   # "engine"
        >>> inferred_name(wheel_count)   # "wheel_count"
    """
    target_name = target.__name__
    if not inspect.isclass(target) and target_name.startswith("make_"):
        return target_name[len("make_"):]
    return target_name


class DependencyRegistry:
    """Registry mapping names to production rules.

    The registry only stores and validates entries; resolving them is the job of
    :class:`~graphwire.resolver.Resolver`. All mutation happens under :attr:`lock`,
    which resolvers share so that once-entries are produced at most once.
    """

    def __init__(self):
        self._entries: dict[str, Entry] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def register(
        self,
        name: str,
        producer: Any,
        kind: ProductionKind,
        dependencies: Optional[Sequence[str]] = None,
        overwrite: bool = False,
        once: bool = False,
    ):
        """Register a production rule under a name.

        Args:
            name: Unique, non-empty name of the entry.
            producer: The constant value, factory function or class.
            kind: How the producer is turned into a value.
            dependencies: Optional names whose resolved values are passed, in order,
                as the producer's leading arguments. Validated but ignored for constants.
            overwrite: Replace an existing entry of the same name instead of failing.
            once: Produce the value on first resolution only and return it thereafter.

        Raises:
            InvalidNameError: If the name is not a non-empty string.
            InvalidKindError: If kind is not a ProductionKind.
            DuplicateNameError: If the name is taken and overwrite is not set.
            InvalidProducerError: If a factory or constructor is not callable.
            InvalidDependencyListError: If dependencies is not a sequence of names.
        """
        if not isinstance(name, str) or not name:
            raise InvalidNameError(name)
        if not isinstance(kind, ProductionKind):
            raise InvalidKindError(kind)
        normalised_dependencies = _normalise_dependencies(name, dependencies)

        if kind is ProductionKind.CONSTANT:
            entry = Entry(name, ResolvedValue(producer), once)
        else:
            if not callable(producer):
                raise InvalidProducerError(_EXPECTED_PRODUCERS[kind], producer)
            rule = ProductionRule(kind, producer, normalised_dependencies)
            entry = Entry(name, rule, once)

        with self._lock:
            if not overwrite and name in self._entries:
                raise DuplicateNameError(name)
            self._entries[name] = entry

        logger.debug(
            "Registered %s <%s> with dependencies %s (once=%s)",
            kind.value,
            name,
            list(entry.dependencies),
            once,
        )

    def register_constant(self, name: str, value: Any, overwrite: bool = False):
        self.register(name, value, ProductionKind.CONSTANT, overwrite=overwrite)

    def register_factory(
        self,
        name: str,
        factory: Callable,
        dependencies: Optional[Sequence[str]] = None,
        overwrite: bool = False,
    ):
        self.register(name, factory, ProductionKind.FACTORY, dependencies, overwrite)

    def register_factory_once(
        self,
        name: str,
        factory: Callable,
        dependencies: Optional[Sequence[str]] = None,
        overwrite: bool = False,
    ):
        self.register(name, factory, ProductionKind.FACTORY, dependencies, overwrite, once=True)

    def register_class(
        self,
        name: str,
        cls: type,
        dependencies: Optional[Sequence[str]] = None,
        overwrite: bool = False,
    ):
        self.register(name, cls, ProductionKind.CONSTRUCTOR, dependencies, overwrite)

    def register_class_once(
        self,
        name: str,
        cls: type,
        dependencies: Optional[Sequence[str]] = None,
        overwrite: bool = False,
    ):
        self.register(name, cls, ProductionKind.CONSTRUCTOR, dependencies, overwrite, once=True)

    def register_bulk(self, registrations: Iterable[tuple]):
        """Register several entries in order.

        Each tuple holds the positional arguments of :meth:`register`, so
        ``("db", make_db, ProductionKind.FACTORY, ["config"])`` registers a factory.
        Registration stops at the first invalid tuple; earlier ones stay registered.
        """
        for registration in registrations:
            self.register(*registration)

    def register_constants(
        self, constants: Mapping[str, Any], prefix: str = "", overwrite: bool = False
    ):
        """Register every item of a mapping as a constant named ``prefix + key``."""
        for key, value in constants.items():
            if not isinstance(key, str):
                raise InvalidNameError(key)
            self.register_constant(prefix + key, value, overwrite)

    def provides(
        self,
        name: Optional[str] = None,
        dependencies: Optional[Sequence[str]] = None,
        once: bool = False,
        overwrite: bool = False,
    ) -> Callable:
        """Decorator registering a class as a constructor or a function as a factory.

        Args:
            name: Optional name to assign; defaults to the class name, or the function
                name with any 'make_' prefix removed.
            dependencies: Names resolved into the leading arguments.
            once: Produce the value once and return it thereafter.
            overwrite: Replace an existing entry of the same name.

        Example:
            @registry.provides(dependencies=["config"], once=True)
            def make_database(config) -> Database:
                return Database(config["dsn"])
        """

        def decorator(obj):
            if inspect.isclass(obj):
                kind = ProductionKind.CONSTRUCTOR
            elif inspect.isfunction(obj):
                kind = ProductionKind.FACTORY
            else:
                raise InvalidProducerError("a class or function", obj)

            self.register(name or inferred_name(obj), obj, kind, dependencies, overwrite, once)
            return obj

        return decorator

    def lookup(self, name: str) -> Optional[Entry]:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def snapshot_counters(self) -> dict[str, int]:
        """Return how often each name was resolved.

        The returned dictionary is a copy; changing it does not affect the registry.
        """
        with self._lock:
            return {name: entry.resolved_counter for name, entry in self._entries.items()}

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _normalise_dependencies(name: str, dependencies) -> tuple[str, ...]:
    if dependencies is None:
        return ()
    if not isinstance(dependencies, (list, tuple)):
        raise InvalidDependencyListError(name, type(dependencies).__name__)
    if not all(isinstance(dependency, str) and dependency for dependency in dependencies):
        raise InvalidDependencyListError(
            name, [_describe_dependency(dependency) for dependency in dependencies]
        )
    return tuple(dependencies)


def _describe_dependency(dependency) -> str:
    if isinstance(dependency, str) and not dependency:
        return "empty str"
    return type(dependency).__name__
