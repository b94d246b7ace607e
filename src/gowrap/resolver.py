from __future__ import annotations

import logging

from .errors import TypeNotFoundError
from .loader.symbols import LoadedMethod, LoadedPackage, LoadedType, LoadedVar, LoadResult
from .model import Method, Param, WrappedType
from .naming import CONTEXT_TYPE
from .params import BLANK, normalize

logger = logging.getLogger(__name__)


def resolve(type_name: str, loaded: LoadResult, target_package: str) -> WrappedType:
    """Build the wrapped-type model for `type_name`.

    The first loaded package declaring the type wins. Methods come from the
    value method set followed by the pointer method set; unexported methods
    and names already seen are skipped, so the order is discovery order.

    Raises TypeNotFoundError when no package declares the type.
    """
    pkg, typ = _lookup(type_name, loaded)
    logger.debug(
        "resolved %s in package %s (%s)",
        type_name,
        pkg.path,
        "interface" if typ.is_interface else "concrete",
    )

    seen: set[str] = set()
    methods: list[Method] = []
    for pointer in (False, True):
        for m in typ.method_set(pointer=pointer):
            if not is_exported(m.name) or m.name in seen:
                continue
            seen.add(m.name)
            methods.append(_method(m, target_package))

    return WrappedType(
        name=type_name,
        source_package=pkg.name,
        target_package=target_package,
        is_interface=typ.is_interface,
        methods=tuple(methods),
    )


def is_exported(name: str) -> bool:
    return name[:1].isupper()


def is_error_type(var: LoadedVar) -> bool:
    """Structural check for Go's `error`: `interface{ Error() string }`.

    Any named type with that underlying interface matches, not only `error`.
    """
    methods = var.interface_methods
    if methods is None or len(methods) != 1:
        return False
    m = methods[0]
    return m.name == "Error" and not m.params and m.results == ("string",)


def _lookup(type_name: str, loaded: LoadResult) -> tuple[LoadedPackage, LoadedType]:
    for pkg in loaded.packages:
        typ = pkg.lookup(type_name)
        if typ is not None:
            return pkg, typ
    searched = ", ".join(p.path for p in loaded.packages) or "<none>"
    raise TypeNotFoundError(f"type {type_name} not found in packages: {searched}")


def _method(m: LoadedMethod, target_package: str) -> Method:
    sig = m.signature
    last = len(sig.params) - 1

    params = _normalize_all(
        sig.params,
        target_package=target_package,
        variadic_index=last if sig.variadic else None,
    )
    results = _normalize_all(sig.results, target_package=target_package)

    method = Method(
        name=m.name,
        params=params,
        results=results,
        accepts_context=bool(params) and params[0].type == CONTEXT_TYPE,
        returns_error=bool(sig.results) and is_error_type(sig.results[-1]),
    )
    logger.debug("method %s", method.declaration())
    return method


def _normalize_all(
    items: tuple[LoadedVar, ...],
    *,
    target_package: str,
    variadic_index: int | None = None,
) -> tuple[Param, ...]:
    # Explicit names are reserved up front so synthesized ones never shadow them.
    used: set[str] = {v.name for v in items if v.name and v.name != BLANK}
    return tuple(
        normalize(v, used, target_package=target_package, variadic=(i == variadic_index))
        for i, v in enumerate(items)
    )
