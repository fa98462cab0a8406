"""Process-wide default registry and module-level shortcuts to it.

Class names are only unique within one registry, so an application
should define all of its classes through this one registry.
"""
from typing import Any, Optional

from classreg.core.descriptor import ClassDescriptor
from classreg.core.handle import ConstructorHandle
from classreg.core.instance import Instance
from classreg.core.registry import ClassRegistry

_default_registry = ClassRegistry()


def default_registry() -> ClassRegistry:
    return _default_registry


def define_class(
    name: str,
    parent_name: Optional[str] = None,
    *,
    description: Optional[str] = None,
) -> ConstructorHandle:
    return _default_registry.define_class(
        name, parent_name, description=description
    )


def instantiate_blank(name: str) -> Instance:
    return _default_registry.instantiate_blank(name)


def get_descriptor(name: str) -> Optional[ClassDescriptor]:
    return _default_registry.get_descriptor(name)


def type_of(value: Any) -> str:
    return _default_registry.type_of(value)


def is_instance_of(value: Any, name: str) -> bool:
    return _default_registry.is_instance_of(value, name)


__all__ = [
    "default_registry",
    "define_class",
    "instantiate_blank",
    "get_descriptor",
    "type_of",
    "is_instance_of",
]
