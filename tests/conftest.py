from __future__ import annotations

import pytest

from gowrap.loader.symbols import (
    InterfaceMethod,
    LoadedMethod,
    LoadedPackage,
    LoadedSignature,
    LoadedType,
    LoadedVar,
    LoadResult,
)

ERROR_IFACE = (InterfaceMethod(name="Error", params=(), results=("string",)),)


def _var(name: str, type: str) -> LoadedVar:
    if type == "error":
        return LoadedVar(name=name, type=type, interface_methods=ERROR_IFACE)
    if type == "context.Context":
        return LoadedVar(
            name=name,
            type=type,
            interface_methods=(
                InterfaceMethod(name="Deadline", params=(), results=("time.Time", "bool")),
                InterfaceMethod(name="Done", params=(), results=("<-chan struct{}",)),
                InterfaceMethod(name="Err", params=(), results=("error",)),
                InterfaceMethod(name="Value", params=("any",), results=("any",)),
            ),
        )
    return LoadedVar(name=name, type=type)


def _method(name: str, params=(), results=(), variadic: bool = False) -> LoadedMethod:
    return LoadedMethod(
        name=name,
        signature=LoadedSignature(
            params=tuple(_var(n, t) for n, t in params),
            results=tuple(_var(n, t) for n, t in results),
            variadic=variadic,
        ),
    )


@pytest.fixture
def var():
    return _var


@pytest.fixture
def method():
    return _method


@pytest.fixture
def io_loaded() -> LoadResult:
    reader = LoadedType(
        name="Reader",
        is_interface=True,
        methods=(_method("Read", params=[("p", "[]byte")], results=[("n", "int"), ("err", "error")]),),
        pointer_methods=(),
    )
    return LoadResult(packages=(LoadedPackage(name="io", path="io", types=(reader,)),))


@pytest.fixture
def store_loaded() -> LoadResult:
    """A concrete `Store` type in package `store` with value and pointer methods."""
    value = (
        _method("Len", results=[("", "int")]),
        _method(
            "Fetch",
            params=[("ctx", "context.Context"), ("id", "string")],
            results=[("", "store.Item"), ("", "error")],
        ),
        _method("helper"),
    )
    pointer = value + (
        _method("Write", params=[("parts", "[]string")], results=[("", "int"), ("", "error")], variadic=True),
        _method("Put", params=[("", "string"), ("", "string")]),
    )
    store = LoadedType(name="Store", is_interface=False, methods=value, pointer_methods=pointer)
    item = LoadedType(name="Item", is_interface=False, methods=(), pointer_methods=())
    return LoadResult(packages=(LoadedPackage(name="store", path="example.com/app/store", types=(store, item)),))
