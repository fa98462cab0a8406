from classreg.core.default import (
    default_registry,
    define_class,
    get_descriptor,
    instantiate_blank,
    is_instance_of,
    type_of,
)
from classreg.core.descriptor import ClassDescriptor, ClassInfo
from classreg.core.handle import ConstructorHandle, constructor
from classreg.core.instance import Instance
from classreg.core.registry import ClassRegistry, logger

__all__ = [
    "ClassRegistry",
    "ClassDescriptor",
    "ClassInfo",
    "ConstructorHandle",
    "Instance",
    "constructor",
    "default_registry",
    "define_class",
    "get_descriptor",
    "instantiate_blank",
    "is_instance_of",
    "type_of",
    "logger",
]
