"""graphwire: a minimal dependency injection engine.

A registry maps names to production rules: a constant, a factory function, or a
class to instantiate. A resolver turns a requested name into a value by first
resolving, depth first and in declaration order, every dependency the rule names,
then calling the producer with those values followed by any extra arguments.

Key Features:
    - Constant, factory and constructor entries, each optionally resolved once
    - Cycle detection along the active resolution path
    - Per-name resolution counters
    - Thread-safe registration and once-memoization

Basic Usage:
    >>> from graphwire.registry import DependencyRegistry
    >>> from graphwire.builders import make_resolver
    >>>
    >>> registry = DependencyRegistry()
    >>> registry.register_constant("engine_config", {"hp": 120})
    >>>
    >>> @registry.provides(dependencies=["engine_config"], once=True)
    >>> class Engine:
    ...     def __init__(self, config):
    ...         self.hp = config["hp"]
    >>>
    >>> resolver = make_resolver(registry)
    >>> resolver.get("Engine").hp
    120

The package consists of:
    - registry: Registration and lookup of production rules
    - resolver: Depth-first resolution with memoization
    - builders: High-level resolver construction
    - domain: Entry and production rule models
    - errors: Package-specific exceptions
"""
