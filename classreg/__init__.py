"""classreg — small thread-safe registry of named classes.

This package lets callers define named classes with single inheritance,
instantiate them, and check type membership (including inherited
membership) in constant time. It's intentionally small and dependency-free.
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path
from typing import Optional

from classreg.core import (
    ClassDescriptor,
    ClassInfo,
    ClassRegistry,
    ConstructorHandle,
    Instance,
    constructor,
    default_registry,
    define_class,
    get_descriptor,
    instantiate_blank,
    is_instance_of,
    type_of,
)
from classreg.exceptions import (
    ClassRegistryError,
    DuplicateClassError,
    UnknownClassError,
    UnknownParentError,
)


def _read_version_file() -> Optional[str]:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf8").strip()
    except OSError:
        return None


def _get_version() -> str:
    # 1) Try to read installed distribution metadata
    try:
        return _pkg_version("classreg")
    except PackageNotFoundError:
        pass

    # 2) Try a VERSION file shipped next to the package
    v = _read_version_file()
    if v:
        return v

    # 3) Fall back to a safe default
    return "0.0.0"


__version__ = _get_version()


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
    "ClassRegistryError",
    "DuplicateClassError",
    "UnknownClassError",
    "UnknownParentError",
    "__version__",
]
