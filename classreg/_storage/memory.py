from typing import TYPE_CHECKING, Dict, Iterator, Optional

from classreg._storage.base import AbstractClassStore
from classreg._types import SubtypeSet, SubtypeView

if TYPE_CHECKING:  # pragma: no cover
    from classreg.core.descriptor import ClassDescriptor


class MemoryClassStore(AbstractClassStore):
    """A simple in-memory class store backed by two dictionaries."""

    def __init__(self) -> None:
        self._classes: Dict[str, "ClassDescriptor"] = {}
        self._subtypes: Dict[str, SubtypeSet] = {}

    def add(self, descriptor: "ClassDescriptor") -> None:
        self._classes[descriptor.name] = descriptor
        self._subtypes[descriptor.name] = {descriptor.name}

    def get(
        self, name: str, default: Optional["ClassDescriptor"] = None
    ) -> Optional["ClassDescriptor"]:
        return self._classes.get(name, default)

    def add_subtype(self, ancestor: str, name: str) -> None:
        self._subtypes[ancestor].add(name)

    def has_subtype(self, ancestor: str, name: str) -> bool:
        entry = self._subtypes.get(ancestor)
        return entry is not None and name in entry

    def subtypes(self, ancestor: str) -> SubtypeView:
        return frozenset(self._subtypes.get(ancestor, ()))

    def names(self) -> Iterator[str]:
        return iter(self._classes.keys())

    def __len__(self) -> int:
        return len(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes
