"""Exceptions raised by the class registry.

Each error keeps its constructor arguments in ``args`` so it survives
pickling; the message is built in ``__str__``.
"""


class ClassRegistryError(Exception):
    """Base exception for class registry errors."""


class DuplicateClassError(ClassRegistryError):
    """Raised when defining a class under a name that is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Class {self.name!r} is already registered"


class UnknownParentError(ClassRegistryError, LookupError):
    """Raised when a class declares a parent that is not registered yet."""

    def __init__(self, name: str, parent_name: str) -> None:
        super().__init__(name, parent_name)
        self.name = parent_name
        self.child_name = name

    def __str__(self) -> str:
        return (
            f"Parent class {self.name!r} of {self.child_name!r} is not registered"
        )


class UnknownClassError(ClassRegistryError, KeyError):
    """Raised when looking up or instantiating an unregistered class."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the name
        return f"Class {self.name!r} is not registered"


__all__ = [
    "ClassRegistryError",
    "DuplicateClassError",
    "UnknownParentError",
    "UnknownClassError",
]
