from typing import (
    TYPE_CHECKING,
    Iterator,
    Optional,
    Protocol,
    runtime_checkable,
)

from classreg._types import SubtypeView

if TYPE_CHECKING:  # pragma: no cover
    from classreg.core.descriptor import ClassDescriptor


@runtime_checkable
class ClassStoreProtocol(Protocol):
    """Minimal protocol describing the storage interface expected by ClassRegistry.

    A store holds two maps: class name to descriptor, and class name to
    the names of every class that is it or descends from it. Only the
    members `classreg.core.ClassRegistry` uses are specified here.
    """

    def add(self, descriptor: "ClassDescriptor") -> None:  # pragma: no cover - interface
        ...

    def get(
        self, name: str, default: Optional["ClassDescriptor"] = None
    ) -> Optional["ClassDescriptor"]:  # pragma: no cover - interface
        ...

    def add_subtype(
        self, ancestor: str, name: str
    ) -> None:  # pragma: no cover - interface
        ...

    def has_subtype(
        self, ancestor: str, name: str
    ) -> bool:  # pragma: no cover - interface
        ...

    def subtypes(self, ancestor: str) -> SubtypeView:  # pragma: no cover - interface
        ...

    def names(self) -> Iterator[str]:  # pragma: no cover - interface
        ...

    def __len__(self) -> int:  # pragma: no cover - interface
        ...

    def __contains__(self, name: object) -> bool:  # pragma: no cover - interface
        ...
