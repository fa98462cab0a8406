import contextlib
import json
import logging
from threading import RLock
from typing import (
    Any,
    ContextManager,
    Dict,
    Iterator,
    Mapping,
    Optional,
)

from classreg._storage import ClassStoreProtocol
from classreg._types import SubtypeView
from classreg.core.descriptor import ClassDescriptor, ClassInfo
from classreg.core.handle import ConstructorHandle
from classreg.core.instance import Instance, descriptor_of
from classreg.core.utils import _make_default_store, locked_method
from classreg.exceptions import (
    DuplicateClassError,
    UnknownClassError,
    UnknownParentError,
)

logger = logging.getLogger(__name__)


class ClassRegistry(Mapping[str, ClassDescriptor]):
    """
    Thread-safe registry of named classes with single inheritance.

    The registry maps class names to descriptors and keeps, for every
    class, the set of names that are it or descend from it. That set is
    filled in when a class is defined, so `is_instance_of` is a single
    membership test no matter how deep the hierarchy is.

    Arguments:
        lock: Optional lock object to use for synchronization. If None,
            a new RLock is created for threadsafe operation.

    Raises:
        DuplicateClassError: If defining a class whose name is already registered.
        UnknownParentError: If defining a class whose parent is not registered.
        UnknownClassError: If looking up or instantiating an unregistered class.

    Examples:
        >>> registry = ClassRegistry()
        >>> Animal = registry.define_class("Animal")
        >>> def initialize(self, name):
        ...     self.name = name
        >>> Animal.initialize = initialize
        >>> Animal.speak = lambda self: f"{self.name} makes a sound"
        >>> Dog = registry.define_class("Dog", "Animal")
        >>> Dog.initialize = lambda self, name: Animal.initialize(self, name)
        >>> rex = Dog("Rex")
        >>> rex.speak()
        'Rex makes a sound'
        >>> registry.type_of(rex), registry.is_instance_of(rex, "Animal")
        ('Dog', True)
    """

    def __init__(
        self,
        *,
        lock: Optional[RLock] = None,
        log_level: int = logging.WARNING,
        store: Optional[ClassStoreProtocol] = None,
    ) -> None:
        """
        Initialize the ClassRegistry.

        Args:
            lock: An optional threading.RLock or similar object for thread safety.
            log_level: Logging level for the registry logger.
            store: An optional class store implementing ClassStoreProtocol.

        Raises:
            TypeError: If the provided lock does not implement context manager methods.
            ValueError: If log_level is not a valid logging level.
        """
        if lock is not None and not all(
            hasattr(lock, method)
            for method in ("__enter__", "__exit__", "acquire", "release")
        ):
            raise TypeError("lock must be a threading.RLock or similar object")

        if not (50 >= log_level >= 0):
            raise ValueError("log_level must be a valid logging level between 0 and 50")

        self._lock: RLock = lock or RLock()
        self._store: ClassStoreProtocol = (
            store if store is not None else _make_default_store()
        )
        logger.setLevel(log_level)

    @locked_method
    def define_class(
        self,
        name: str,
        parent_name: Optional[str] = None,
        *,
        description: Optional[str] = None,
    ) -> ConstructorHandle:
        """
        Define and register a new class.

        Args:
            name: Unique name of the class.
            parent_name: Name of an already registered class to inherit from.
            description: Optional free-form description of the class.
        Returns:
            A handle that constructs instances when called and forwards
            attribute access to the new class.

        Raises:
            TypeError: If a name is not a string.
            ValueError: If a name is empty or contains whitespace.
            DuplicateClassError: If `name` is already registered.
            UnknownParentError: If `parent_name` is given but not registered.
        """
        self._validate_name(name)
        if name in self._store:
            raise DuplicateClassError(name)

        parent: Optional[ClassDescriptor] = None
        if parent_name is not None:
            self._validate_name(parent_name)
            parent = self._store.get(parent_name)
            if parent is None:
                raise UnknownParentError(name, parent_name)

        descriptor = ClassDescriptor(name, parent, description)
        self._store.add(descriptor)
        for ancestor in descriptor.ancestors():
            self._store.add_subtype(ancestor.name, name)

        logger.debug(
            "Defined class %s%s",
            name,
            f" extending {parent_name}" if parent_name is not None else "",
        )
        return ConstructorHandle(descriptor, descriptor.new)

    def instantiate_blank(self, name: str) -> Instance:
        """
        Create an instance of `name` without running its ``initialize``.

        Raises:
            UnknownClassError: If `name` is not registered.
        """
        return self[name].blank()

    def get_descriptor(self, name: str) -> Optional[ClassDescriptor]:
        """Return the descriptor registered under `name`, or None."""
        return self.get(name)

    def type_of(self, value: Any) -> str:
        """
        Return the class name of an instance, or the Python type name of
        anything else (``"int"``, ``"str"``, ``"NoneType"``, ...).
        """
        if issubclass(type(value), Instance):
            return descriptor_of(value).name
        return type(value).__name__

    @locked_method
    def is_instance_of(self, value: Any, name: str) -> bool:
        """
        Return whether `value` is an instance of class `name` or one of its
        descendants. Values that are not class instances are compared by
        their Python type name instead.
        """
        if not issubclass(type(name), str):
            return False
        if issubclass(type(value), Instance):
            return self._store.has_subtype(name, descriptor_of(value).name)
        return type(value).__name__ == name

    @locked_method
    def subtypes(self, name: str) -> SubtypeView:
        """Return the names of `name` and every class descending from it."""
        return self._store.subtypes(name)

    @locked_method
    def snapshot(self) -> Dict[str, ClassInfo]:
        out: Dict[str, ClassInfo] = {}
        for name in self._store.names():
            descriptor = self._store.get(name)
            if descriptor is not None:
                out[name] = descriptor.info()
        return out

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        snap = self.snapshot()
        return {
            name: {
                "parent": info.parent,
                "version": info.version,
                "methods": list(info.methods),
                "all_methods": list(info.all_methods),
                "description": info.description,
            }
            for name, info in snap.items()
        }

    def to_json(self, **kwargs: Any) -> str:
        """
        Serialize the class hierarchy (not the method bodies) to a JSON string.
        """
        return json.dumps(self.to_dict(), **kwargs)

    def bulk(self) -> ContextManager["ClassRegistry"]:
        """
        Context manager holding the registry lock across several operations.

        Usage:
            with registry.bulk() as reg:
                reg.define_class("Base")
                reg.define_class("Derived", "Base")
        """

        @contextlib.contextmanager
        def _bulk_ctx() -> Iterator[ClassRegistry]:
            self._lock.acquire()
            try:
                yield self
            finally:
                self._lock.release()

        return _bulk_ctx()

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Class name must be a string, got {type(name)}")
        elif not name:
            raise ValueError("Class name cannot be an empty string")
        elif any(c.isspace() for c in name):
            raise ValueError("Class name cannot contain whitespace characters")

    @locked_method
    def __getitem__(self, name: str) -> ClassDescriptor:
        descriptor = self._store.get(name)
        if descriptor is None:
            raise UnknownClassError(name)
        return descriptor

    @locked_method
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store.names()))

    @locked_method
    def __len__(self) -> int:
        return len(self._store)

    @locked_method
    def __contains__(self, name: object) -> bool:
        return name in self._store

    @locked_method
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._store.names())!r})"


__all__ = ["ClassRegistry"]
