import functools
from typing import TYPE_CHECKING, Any, Callable

from classreg._storage import ClassStoreProtocol, MemoryClassStore

if TYPE_CHECKING:  # pragma: no cover
    from classreg.core.registry import ClassRegistry


def locked_method(method: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to lock method calls for thread safety."""

    @functools.wraps(method)
    def wrapper(self: "ClassRegistry", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def _make_default_store() -> ClassStoreProtocol:
    """Create the default in-memory class store."""
    return MemoryClassStore()
