from typing import Any, Callable, Union

from classreg.core.descriptor import ClassDescriptor
from classreg.core.instance import Instance


class ConstructorHandle:
    """Callable stand-in for a class descriptor.

    Attribute reads and writes go straight to the wrapped descriptor, so
    methods can be attached after the class is defined. Calling the handle
    calls its constructor, which by default is the descriptor's ``new``.
    """

    __slots__ = ("_descriptor", "_constructor")

    def __init__(
        self, descriptor: ClassDescriptor, constructor: Callable[..., Any]
    ) -> None:
        object.__setattr__(self, "_descriptor", descriptor)
        object.__setattr__(self, "_constructor", constructor)

    @property
    def descriptor(self) -> ClassDescriptor:
        return self._descriptor

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ConstructorHandle.__slots__:
            raise AttributeError(name)
        return getattr(self._descriptor, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ConstructorHandle.__slots__:
            raise AttributeError(f"cannot set internal attribute {name!r} on a handle")
        elif name in type(self).__dict__:
            object.__setattr__(self, name, value)
        else:
            setattr(self._descriptor, name, value)

    def __call__(self, *args: Any, **kwargs: Any) -> Instance:
        return self._constructor(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._descriptor.name!r})"


def constructor(
    target: Union[ClassDescriptor, ConstructorHandle],
    ctor: Union[str, Callable[..., Any]] = "new",
) -> ConstructorHandle:
    """
    Wrap a class in a handle whose call goes to a chosen constructor.

    Args:
        target: The class descriptor, or an existing handle for it.
        ctor: Name of a constructor resolvable on the class (``"new"`` by
            default), or any callable to use as the constructor.

    Raises:
        TypeError: If target is not a class or ctor is neither a name nor callable.
        AttributeError: If the named constructor does not exist on the class.
    """
    if isinstance(target, ConstructorHandle):
        descriptor = target.descriptor
    elif isinstance(target, ClassDescriptor):
        descriptor = target
    else:
        raise TypeError(f"constructor target must be a class, got {type(target)}")

    if isinstance(ctor, str):
        try:
            func = getattr(descriptor, ctor)
        except AttributeError:
            raise AttributeError(
                f"Constructor {ctor!r} does not exist on class {descriptor.name!r}"
            ) from None
    elif callable(ctor):
        func = ctor
    else:
        raise TypeError(f"ctor must be a method name or callable, got {type(ctor)}")
    return ConstructorHandle(descriptor, func)


__all__ = ["ConstructorHandle", "constructor"]
