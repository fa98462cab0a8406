from typing import Any, Callable, FrozenSet, Set

# A method binding stored on a class descriptor: called with the instance
# as its first argument.
Method = Callable[..., Any]

# Subtype index entries: mutable inside the store, frozen when handed out.
SubtypeSet = Set[str]
SubtypeView = FrozenSet[str]

__all__ = ["Method", "SubtypeSet", "SubtypeView"]
