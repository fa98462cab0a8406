from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional

from classreg._types import SubtypeView

if TYPE_CHECKING:  # pragma: no cover
    from classreg.core.descriptor import ClassDescriptor


class AbstractClassStore(ABC):
    """Abstract base class for class store implementations."""

    @abstractmethod
    def add(self, descriptor: "ClassDescriptor") -> None:
        pass

    @abstractmethod
    def get(
        self, name: str, default: Optional["ClassDescriptor"] = None
    ) -> Optional["ClassDescriptor"]:
        pass

    @abstractmethod
    def add_subtype(self, ancestor: str, name: str) -> None:
        pass

    @abstractmethod
    def has_subtype(self, ancestor: str, name: str) -> bool:
        pass

    @abstractmethod
    def subtypes(self, ancestor: str) -> SubtypeView:
        pass

    @abstractmethod
    def names(self) -> Iterator[str]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, name: object) -> bool:
        pass
