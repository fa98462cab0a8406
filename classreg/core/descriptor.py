from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from classreg._types import Method
from classreg.core.instance import Instance

_missing = object()


def _initialize(self: Instance, *args: Any, **kwargs: Any) -> None:
    pass


@dataclass(frozen=True)
class ClassInfo:
    """Read-only summary of a class, for documentation renderers."""

    name: str
    parent: Optional[str]
    version: int
    methods: Tuple[str, ...]
    all_methods: Tuple[str, ...]
    description: Optional[str] = None


class ClassDescriptor:
    """
    Method table of a registered class.

    Reading an attribute that is not one of the descriptor's own properties
    looks the name up in this class's method table, then in the parent's,
    and so on up to the root. Writing a public attribute stores a method
    binding on this class only.

    Examples:
        >>> point = ClassDescriptor("Point")
        >>> def initialize(self, x, y):
        ...     self.x, self.y = x, y
        >>> point.initialize = initialize
        >>> point.norm1 = lambda self: abs(self.x) + abs(self.y)
        >>> point.new(3, -4).norm1()
        7
    """

    __slots__ = ("_name", "_version", "_parent", "_methods", "_description")

    def __init__(
        self,
        name: str,
        parent: Optional["ClassDescriptor"] = None,
        description: Optional[str] = None,
    ) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_version", 1)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_description", description)
        # every class starts with its own no-op initialize
        object.__setattr__(self, "_methods", {"initialize": _initialize})

    @property
    def name(self) -> str:
        return self._name

    @property
    def typename(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["ClassDescriptor"]:
        return self._parent

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def version(self) -> int:
        return self._version

    @version.setter
    def version(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"version must be an int, got {type(value)}")
        if value < self._version:
            raise ValueError(
                f"version of {self._name!r} cannot go back from "
                f"{self._version} to {value}"
            )
        object.__setattr__(self, "_version", value)

    def ancestors(self) -> Iterator["ClassDescriptor"]:
        """Yield the parent, the parent's parent, and so on up to the root."""
        descriptor = self._parent
        while descriptor is not None:
            yield descriptor
            descriptor = descriptor._parent

    def lookup(self, name: str, default: Any = None) -> Any:
        """Resolve `name` through the fallback chain, or return `default`."""
        descriptor: Optional[ClassDescriptor] = self
        while descriptor is not None:
            methods = descriptor._methods
            if name in methods:
                return methods[name]
            descriptor = descriptor._parent
        return default

    def own_methods(self) -> Dict[str, Method]:
        return dict(self._methods)

    def method_names(self) -> Tuple[str, ...]:
        names = set(self._methods)
        for ancestor in self.ancestors():
            names.update(ancestor._methods)
        return tuple(sorted(names))

    def blank(self) -> Instance:
        return Instance(self)

    def new(self, *args: Any, **kwargs: Any) -> Instance:
        """Create an instance and run ``initialize`` on it with the given arguments."""
        instance = Instance(self)
        self.lookup("initialize")(instance, *args, **kwargs)
        return instance

    def info(self) -> ClassInfo:
        return ClassInfo(
            name=self._name,
            parent=self._parent.name if self._parent is not None else None,
            version=self._version,
            methods=tuple(sorted(self._methods)),
            all_methods=self.method_names(),
            description=self._description,
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ClassDescriptor.__slots__:
            raise AttributeError(name)
        value = self.lookup(name, _missing)
        if value is _missing:
            raise AttributeError(f"class {self._name!r} has no attribute {name!r}")
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ClassDescriptor.__slots__:
            raise AttributeError(f"cannot set internal attribute {name!r} on a class")
        elif name in type(self).__dict__:
            object.__setattr__(self, name, value)
        elif name.startswith("__"):
            raise AttributeError(f"cannot set special attribute {name!r} on a class")
        else:
            self._methods[name] = value

    def __repr__(self) -> str:
        if self._parent is None:
            return f"<{self.__class__.__name__} {self._name!r}>"
        return (
            f"<{self.__class__.__name__} {self._name!r} "
            f"extends {self._parent.name!r}>"
        )


__all__ = ["ClassDescriptor", "ClassInfo"]
