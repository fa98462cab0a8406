import pytest

from classreg import ClassDescriptor, ClassRegistry, ConstructorHandle, constructor


def test_descriptor_repr_mentions_parent() -> None:
    r = ClassRegistry()
    r.define_class("A")
    r.define_class("B", "A")
    assert repr(r["A"]) == "<ClassDescriptor 'A'>"
    assert repr(r["B"]) == "<ClassDescriptor 'B' extends 'A'>"


def test_ancestors_are_listed_nearest_first() -> None:
    r = ClassRegistry()
    r.define_class("A")
    r.define_class("B", "A")
    r.define_class("C", "B")
    assert [d.name for d in r["C"].ancestors()] == ["B", "A"]
    assert list(r["A"].ancestors()) == []


def test_lookup_returns_default_when_missing() -> None:
    d = ClassDescriptor("Solo")
    sentinel = object()
    assert d.lookup("nothing", sentinel) is sentinel
    assert d.lookup("nothing") is None
    with pytest.raises(AttributeError):
        _ = d.nothing


def test_version_only_moves_forward() -> None:
    d = ClassDescriptor("V")
    assert d.version == 1
    d.version = 2
    assert d.version == 2
    with pytest.raises(ValueError):
        d.version = 1
    with pytest.raises(TypeError):
        d.version = "3"  # type: ignore[assignment]
    assert d.version == 2


def test_read_only_properties_cannot_be_overwritten() -> None:
    d = ClassDescriptor("RO")
    with pytest.raises(AttributeError):
        d.name = "Other"  # type: ignore[misc]
    assert d.name == "RO"


def test_own_methods_and_method_names() -> None:
    r = ClassRegistry()
    A = r.define_class("A")
    A.area = lambda self: 0
    B = r.define_class("B", "A")
    B.perimeter = lambda self: 0
    assert set(r["B"].own_methods()) == {"initialize", "perimeter"}
    assert r["B"].method_names() == ("area", "initialize", "perimeter")


def test_handle_proxies_reads_and_writes() -> None:
    r = ClassRegistry()
    A = r.define_class("A", description="letters")
    assert isinstance(A, ConstructorHandle)
    assert A.name == "A"
    assert A.description == "letters"
    assert A.parent is None
    A.shout = lambda self: "A!"
    assert r["A"].lookup("shout") is A.shout
    A.version = 3
    assert r["A"].version == 3
    assert repr(A) == "ConstructorHandle('A')"


def test_handle_exposes_parent_descriptor() -> None:
    r = ClassRegistry()
    A = r.define_class("A")
    B = r.define_class("B", "A")
    assert B.parent is A.descriptor


def test_constructor_with_named_factory() -> None:
    r = ClassRegistry()
    Point = r.define_class("Point")

    def initialize(self, x, y):
        self.x, self.y = x, y

    Point.initialize = initialize
    Point.origin = lambda: Point(0, 0)

    make_origin = constructor(Point, "origin")
    p = make_origin()
    assert (p.x, p.y) == (0, 0)
    assert r.type_of(p) == "Point"
    # the new handle still forwards attributes
    assert make_origin.name == "Point"


def test_constructor_defaults_to_new() -> None:
    r = ClassRegistry()
    r.define_class("A")
    handle = constructor(r["A"])
    assert r.type_of(handle()) == "A"


def test_constructor_with_callable() -> None:
    r = ClassRegistry()
    A = r.define_class("A")
    handle = constructor(A, lambda *args: r.instantiate_blank("A"))
    a = handle(1, 2, 3)
    assert r.is_instance_of(a, "A")


def test_constructor_rejects_unknown_name_and_bad_targets() -> None:
    r = ClassRegistry()
    A = r.define_class("A")
    with pytest.raises(AttributeError):
        constructor(A, "build")
    with pytest.raises(TypeError):
        constructor("A")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        constructor(A, 42)  # type: ignore[arg-type]
