"""Domain models used throughout the package."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union


class ProductionKind(Enum):
    """How an entry turns its dependencies into a value."""

    CONSTANT = "constant"
    FACTORY = "factory"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True)
class ProductionRule:
    """A rule which has not been resolved yet.

    Attributes:
        kind: Either FACTORY or CONSTRUCTOR.
        producer: The function to call, or the class to instantiate.
        dependencies: Names resolved, in order, into the producer's leading arguments.
    """

    kind: ProductionKind
    producer: Callable
    dependencies: tuple[str, ...]


@dataclass(frozen=True)
class ResolvedValue:
    """A constant, or the memoized result of a once-entry."""

    value: Any


Rule = Union[ProductionRule, ResolvedValue]


@dataclass
class Entry:
    """The registered production rule for one name, plus its runtime metadata.

    Attributes:
        name: The unique name of the entry.
        rule: The pending production rule, or the resolved value.
        once: Whether the first produced value replaces the production rule.
        resolved_counter: Number of resolution calls made for this name.
    """

    name: str
    rule: Rule
    once: bool = False
    resolved_counter: int = 0

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.rule, ResolvedValue)

    @property
    def kind(self) -> ProductionKind:
        if isinstance(self.rule, ResolvedValue):
            return ProductionKind.CONSTANT
        return self.rule.kind

    @property
    def producer(self) -> Optional[Callable]:
        if isinstance(self.rule, ResolvedValue):
            return None
        return self.rule.producer

    @property
    def dependencies(self) -> tuple[str, ...]:
        if isinstance(self.rule, ResolvedValue):
            return ()
        return self.rule.dependencies

    def memoize(self, value: Any):
        # single assignment, so readers see either the old rule or the value
        self.rule = ResolvedValue(value)
