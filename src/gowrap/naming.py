from __future__ import annotations

from collections.abc import Collection

CONTEXT_TYPE = "context.Context"
ERROR_TYPE = "error"

_FALLBACK = "v"


def base_name(type_expr: str) -> str:
    """Return the unsuffixed variable name for a Go type expression.

    `context.Context` maps to `ctx` and `error` to `err`. Anything else maps to
    the lower-cased first letter of the type's simple name: the package
    qualifier is dropped and leading operators such as `[]` or `*` are skipped.
    """
    if type_expr == CONTEXT_TYPE:
        return "ctx"
    if type_expr == ERROR_TYPE:
        return "err"

    simple = type_expr.rsplit(".", 1)[-1]
    for ch in simple:
        if ch.isalpha():
            return ch.lower()
    return _FALLBACK


def synthesize(type_expr: str, used_names: Collection[str]) -> str:
    """Return a name for an unnamed parameter that is not in `used_names`.

    Collisions are resolved by appending 1, 2, ... to the base name. The caller
    registers the returned name.
    """
    base = base_name(type_expr)
    name = base
    n = 0
    while name in used_names:
        n += 1
        name = f"{base}{n}"
    return name
