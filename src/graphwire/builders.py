"""High level entry points for constructing resolvers."""

from graphwire.registry import DependencyRegistry
from graphwire.resolver import Resolver, ResolverConfig

__all__ = ["make_resolver"]


def make_resolver(
    registry: DependencyRegistry, ignore_redundant_args: bool = False
) -> Resolver:
    """Create a :class:`Resolver` over the given registry.

    Args:
        registry: The registry holding the production rules.
        ignore_redundant_args: Accept and discard extra arguments passed to entries
            which are already resolved, instead of raising RedundantArgsError.

    Returns:
        A resolver sharing the registry's lock.

    Example:
        >>> registry = DependencyRegistry()
        >>> registry.register_constant("engine_config", {"hp": 120})
        >>> registry.register_class_once("Engine", Engine, ["engine_config"])
        >>> resolver = make_resolver(registry)
        >>> engine = resolver.get("Engine")
    """
    return Resolver(registry, ResolverConfig(ignore_redundant_args))
