"""
Depth-first resolution of registered names into values.

A resolver walks the registry starting from the requested name. Each declared
dependency is resolved recursively, in declaration order, before the producer is
invoked with the resolved values followed by any extra arguments supplied by the
caller. Extra arguments are never forwarded to dependencies.

The names currently being resolved on the call stack form the active path. A
dependency which is already on the active path closes a cycle and fails the whole
resolution with a :class:`~graphwire.errors.CircularDependencyError`.

Once-entries are memoized after their first successful production: the entry's rule
is replaced by the produced value, and later resolutions return that value without
touching the producer or the dependencies again.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Optional

from graphwire.domain import Entry, ProductionRule, ResolvedValue
from graphwire.errors import (
    CircularDependencyError,
    RedundantArgsError,
    UnknownDependencyError,
)
from graphwire.registry import DependencyRegistry

__all__ = ["ResolverConfig", "Resolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    """Resolution settings.

    Attributes:
        ignore_redundant_args: Accept and discard extra arguments passed to an entry
            whose value is already resolved, instead of raising RedundantArgsError.
    """

    ignore_redundant_args: bool = False


class Resolver:
    """Produce values for names registered in a :class:`DependencyRegistry`."""

    def __init__(self, registry: DependencyRegistry, config: Optional[ResolverConfig] = None):
        self._registry = registry
        self.config = config or ResolverConfig()

    def set_ignore_redundant_args(self, ignore: bool):
        self.config = dataclasses.replace(self.config, ignore_redundant_args=ignore)

    def resolve(self, name: str, *args: Any) -> Any:
        """Resolve a name, passing extra arguments to its producer.

        Args:
            name: The registered name to resolve.
            *args: Arguments appended after the resolved dependencies.

        Returns:
            The produced (or memoized) value.

        Raises:
            UnknownDependencyError: If the name, or any of its dependencies, is not registered.
            CircularDependencyError: If the dependency graph below the name has a cycle.
            RedundantArgsError: If args are passed to an already resolved entry.
        """
        with self._registry.lock:
            return self._resolve(name, args, [])

    get = resolve

    def get_resolved_dependency_count(self) -> dict[str, int]:
        return self._registry.snapshot_counters()

    def _resolve(self, name: str, args: tuple, active_path: list[str]) -> Any:
        entry = self._registry.lookup(name)
        if entry is None:
            raise UnknownDependencyError(name)
        entry.resolved_counter += 1

        rule = entry.rule
        if isinstance(rule, ResolvedValue):
            if args:
                if not self.config.ignore_redundant_args:
                    raise RedundantArgsError(name)
                logger.debug("Discarding %d args passed to resolved <%s>", len(args), name)
            return rule.value

        arguments = self._resolve_dependencies(name, rule, active_path)
        arguments.extend(args)

        value = _produce(rule, arguments)
        if entry.once:
            _memoize(entry, value)
        return value

    def _resolve_dependencies(
        self, name: str, rule: ProductionRule, active_path: list[str]
    ) -> list:
        active_path.append(name)
        try:
            resolved = []
            for dependency_name in rule.dependencies:
                if dependency_name in active_path:
                    raise CircularDependencyError([*active_path, dependency_name])
                resolved.append(self._resolve(dependency_name, (), active_path))
            return resolved
        finally:
            active_path.pop()


def _produce(rule: ProductionRule, arguments: list) -> Any:
    # classes are instantiated and factories called the same way
    return rule.producer(*arguments)


def _memoize(entry: Entry, value: Any):
    entry.memoize(value)
    logger.debug("Memoized once-dependency <%s>", entry.name)
