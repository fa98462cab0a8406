import uuid

import pytest

import classreg
from classreg import DuplicateClassError, UnknownClassError


def unique(prefix: str) -> str:
    # the default registry lives for the whole test session
    return f"{prefix}_{uuid.uuid4().hex}"


def test_module_level_functions_share_one_registry() -> None:
    base = unique("Base")
    child = unique("Child")
    Base = classreg.define_class(base)
    Child = classreg.define_class(child, base)

    assert classreg.get_descriptor(base) is Base.descriptor
    assert classreg.default_registry()[child] is Child.descriptor
    c = Child()
    assert classreg.type_of(c) == child
    assert classreg.is_instance_of(c, base)
    assert not classreg.is_instance_of(Base(), child)


def test_module_level_errors() -> None:
    name = unique("Dup")
    classreg.define_class(name)
    with pytest.raises(DuplicateClassError):
        classreg.define_class(name)
    with pytest.raises(UnknownClassError):
        classreg.instantiate_blank(unique("Missing"))
    assert classreg.get_descriptor(unique("Missing")) is None


def test_module_level_blank_instance() -> None:
    name = unique("Blank")
    cls = classreg.define_class(name)
    cls.initialize = lambda self: setattr(self, "touched", True)
    blank = classreg.instantiate_blank(name)
    assert not hasattr(blank, "touched")
    assert classreg.type_of(blank) == name


def test_version_is_a_string() -> None:
    assert isinstance(classreg.__version__, str)
