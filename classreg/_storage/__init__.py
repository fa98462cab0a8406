from .memory import MemoryClassStore
from .protocol import ClassStoreProtocol

__all__ = ["MemoryClassStore", "ClassStoreProtocol"]
