from __future__ import annotations

from gowrap.loader.symbols import LoadedVar
from gowrap.params import element_type, normalize, qualify


def test_qualify_drops_target_package_only():
    assert qualify("store.Item", "store") == "Item"
    assert qualify("map[string]*store.Item", "store") == "map[string]*Item"
    assert qualify("func(store.Item) io.Reader", "store") == "func(Item) io.Reader"
    assert qualify("mystore.Item", "store") == "mystore.Item"
    assert qualify("io.Reader", "main") == "io.Reader"
    assert qualify("io.Reader", "") == "io.Reader"


def test_element_type():
    assert element_type("[]string") == "string"
    assert element_type("[][]byte") == "[]byte"


def test_normalize_keeps_explicit_name():
    used: set[str] = set()
    p = normalize(LoadedVar(name="id", type="string"), used, target_package="main")
    assert (p.name, p.type, p.variadic) == ("id", "string", False)
    assert used == {"id"}


def test_normalize_synthesizes_and_registers_name():
    used: set[str] = set()
    first = normalize(LoadedVar(name="", type="string"), used, target_package="main")
    second = normalize(LoadedVar(name="", type="string"), used, target_package="main")
    assert (first.name, second.name) == ("s", "s1")
    assert used == {"s", "s1"}


def test_normalize_treats_blank_as_unnamed():
    used: set[str] = set()
    p = normalize(LoadedVar(name="_", type="int"), used, target_package="main")
    assert p.name == "i"


def test_normalize_variadic_uses_element_type():
    used: set[str] = set()
    p = normalize(LoadedVar(name="", type="[]io.Writer"), used, target_package="main", variadic=True)
    assert (p.name, p.type, p.variadic) == ("w", "io.Writer", True)


def test_normalize_applies_qualification_before_naming():
    used: set[str] = set()
    p = normalize(LoadedVar(name="", type="store.Item"), used, target_package="store")
    assert (p.name, p.type) == ("i", "Item")
