from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol


@dataclass(frozen=True)
class InterfaceMethod:
    name: str
    params: tuple[str, ...]
    results: tuple[str, ...]


@dataclass(frozen=True)
class LoadedVar:
    """One parameter or result of a method signature.

    `type` is qualified with the declaring package name (`io.Reader`, `p.Item`).
    `interface_methods` is None unless the underlying type is an interface, in
    which case it holds the interface's complete method list.
    """

    name: str
    type: str
    interface_methods: tuple[InterfaceMethod, ...] | None = None


@dataclass(frozen=True)
class LoadedSignature:
    params: tuple[LoadedVar, ...]
    results: tuple[LoadedVar, ...]
    variadic: bool = False


@dataclass(frozen=True)
class LoadedMethod:
    name: str
    signature: LoadedSignature


@dataclass(frozen=True)
class LoadedType:
    name: str
    is_interface: bool
    methods: tuple[LoadedMethod, ...]  # value receiver form
    pointer_methods: tuple[LoadedMethod, ...]  # pointer receiver form

    def method_set(self, *, pointer: bool) -> tuple[LoadedMethod, ...]:
        return self.pointer_methods if pointer else self.methods


@dataclass(frozen=True)
class LoadedPackage:
    name: str
    path: str
    types: tuple[LoadedType, ...]

    def lookup(self, name: str) -> LoadedType | None:
        for t in self.types:
            if t.name == name:
                return t
        return None


@dataclass(frozen=True)
class LoadResult:
    packages: tuple[LoadedPackage, ...]

    @classmethod
    def from_json(cls, obj: Any) -> "LoadResult":
        """Build a load result from the scanner's JSON document.

        Malformed entries are skipped rather than rejected.
        """
        packages: list[LoadedPackage] = []
        raw_pkgs = obj.get("packages") if isinstance(obj, dict) else None
        if not isinstance(raw_pkgs, list):
            return cls(packages=())

        for p in raw_pkgs:
            if not isinstance(p, dict):
                continue
            name = p.get("name")
            path = p.get("path")
            if not isinstance(name, str) or not isinstance(path, str):
                continue
            types: list[LoadedType] = []
            raw_types = p.get("types")
            for t in raw_types if isinstance(raw_types, list) else []:
                if not isinstance(t, dict):
                    continue
                tname = t.get("name")
                if not isinstance(tname, str) or not tname:
                    continue
                types.append(
                    LoadedType(
                        name=tname,
                        is_interface=bool(t.get("interface")),
                        methods=_methods(t.get("methods")),
                        pointer_methods=_methods(t.get("pointer_methods")),
                    )
                )
            packages.append(LoadedPackage(name=name, path=path, types=tuple(types)))
        return cls(packages=tuple(packages))


class TypeLoader(Protocol):
    """Source of the read-only type model the resolver works on."""

    def load(self, pattern: str, *, type_name: str | None = None) -> LoadResult:
        """Load the packages matched by `pattern`.

        When `type_name` is given, loaders may omit every other type.
        """
        ...

    def package_name(self, directory: Path) -> str:
        """Return the name of the Go package in `directory`."""
        ...


def _str_list(v: Any) -> tuple[str, ...] | None:
    if not isinstance(v, list) or not all(isinstance(x, str) for x in v):
        return None
    return tuple(v)


def _vars(v: Any) -> tuple[LoadedVar, ...] | None:
    if v is None:
        return ()
    if not isinstance(v, list):
        return None
    out: list[LoadedVar] = []
    for item in v:
        if not isinstance(item, dict):
            return None
        name = item.get("name")
        typ = item.get("type")
        if not isinstance(name, str) or not isinstance(typ, str) or not typ:
            return None
        iface: tuple[InterfaceMethod, ...] | None = None
        raw_iface = item.get("interface")
        if isinstance(raw_iface, list):
            methods: list[InterfaceMethod] = []
            for m in raw_iface:
                if not isinstance(m, dict) or not isinstance(m.get("name"), str):
                    continue
                params = _str_list(m.get("params") or [])
                results = _str_list(m.get("results") or [])
                if params is None or results is None:
                    continue
                methods.append(InterfaceMethod(name=m["name"], params=params, results=results))
            iface = tuple(methods)
        out.append(LoadedVar(name=name, type=typ, interface_methods=iface))
    return tuple(out)


def _methods(v: Any) -> tuple[LoadedMethod, ...]:
    if not isinstance(v, list):
        return ()
    out: list[LoadedMethod] = []
    for m in v:
        if not isinstance(m, dict):
            continue
        name = m.get("name")
        if not isinstance(name, str) or not name:
            continue
        params = _vars(m.get("params"))
        results = _vars(m.get("results"))
        # Skip methods whose signature is incomplete.
        if params is None or results is None:
            continue
        sig = LoadedSignature(params=params, results=results, variadic=bool(m.get("variadic")))
        out.append(LoadedMethod(name=name, signature=sig))
    return tuple(out)
