from types import FunctionType, MethodType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from classreg.core.descriptor import ClassDescriptor

_missing = object()


class Instance:
    """An object created from a class descriptor.

    Fields live on the instance itself and are usually set by the class's
    ``initialize`` method. Any attribute the instance does not hold is
    resolved through the descriptor's fallback chain; plain functions come
    back bound to the instance, other values are returned as stored.

    The ``_descriptor`` attribute is reserved.
    """

    __slots__ = ("_descriptor", "__dict__", "__weakref__")

    def __init__(self, descriptor: "ClassDescriptor") -> None:
        self._descriptor = descriptor

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_descriptor":
            raise AttributeError(name)
        descriptor = self._descriptor
        value = descriptor.lookup(name, _missing)
        if value is _missing:
            raise AttributeError(
                f"{descriptor.name!r} instance has no attribute {name!r}"
            )
        if isinstance(value, FunctionType):
            return MethodType(value, self)
        return value

    def __repr__(self) -> str:
        return f"<{self._descriptor.name} instance at {id(self):#x}>"


def descriptor_of(instance: Instance) -> "ClassDescriptor":
    """Return the class descriptor an instance is bound to."""
    return instance._descriptor


__all__ = ["Instance", "descriptor_of"]
