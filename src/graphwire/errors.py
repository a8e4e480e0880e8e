"""Exceptions raised by the registry and the resolver."""

from typing import Sequence

__all__ = [
    "DependencyError",
    "RegistrationError",
    "InvalidNameError",
    "DuplicateNameError",
    "InvalidProducerError",
    "InvalidKindError",
    "InvalidDependencyListError",
    "ResolutionError",
    "UnknownDependencyError",
    "CircularDependencyError",
    "RedundantArgsError",
]


class DependencyError(Exception):
    """Base class for every error raised by graphwire."""

    pass


class RegistrationError(DependencyError):
    """Raised when an entry cannot be registered."""

    pass


class InvalidNameError(RegistrationError):
    def __init__(self, name):
        super().__init__(
            f"Expected dependency name to be a non-empty string, but got: {_type_name(name)}"
        )
        self.name = name


class DuplicateNameError(RegistrationError):
    def __init__(self, name: str):
        super().__init__(f'Dependency "{name}" is already registered')
        self.name = name


class InvalidProducerError(RegistrationError):
    def __init__(self, expected: str, producer):
        super().__init__(f"Expected {expected}, but got: {_type_name(producer)}")
        self.producer = producer


class InvalidKindError(RegistrationError):
    def __init__(self, kind):
        super().__init__(f"Expected a ProductionKind, but got: {kind!r}")
        self.kind = kind


class InvalidDependencyListError(RegistrationError):
    """Raised when a dependency list is not a sequence of names.

    Attributes:
        name: The name being registered.
        observed_types: Type names of the list elements, or the single type name of
            the value when it was not a list or tuple at all.
    """

    def __init__(self, name: str, observed_types):
        if isinstance(observed_types, str):
            observed = observed_types
        else:
            observed = "[" + ", ".join(observed_types) + "]"
        super().__init__(
            f'Expected dependencies for "{name}" to be a sequence of str, but got: {observed}'
        )
        self.name = name
        self.observed_types = observed_types


class ResolutionError(DependencyError):
    """Raised when a registered name cannot be turned into a value."""

    pass


class UnknownDependencyError(ResolutionError):
    def __init__(self, name: str):
        super().__init__(f"Unknown dependency: {name}")
        self.name = name


class CircularDependencyError(ResolutionError):
    """Raised when a dependency is already being resolved further up the call stack.

    Attributes:
        cycle: The names on the active path, ending with the name that closes the cycle.
    """

    def __init__(self, cycle: Sequence[str]):
        self.cycle = tuple(cycle)
        super().__init__("Circular dependency detected: " + " => ".join(self.cycle))


class RedundantArgsError(ResolutionError):
    def __init__(self, name: str):
        super().__init__(
            f'resolve("{name}", *args) with non-empty args is only allowed on the first '
            f"resolution of a once-dependency. Configure the resolver with "
            f"ignore_redundant_args=True to suppress this error."
        )
        self.name = name


def _type_name(value) -> str:
    return type(value).__name__
