from __future__ import annotations

import re

from .loader.symbols import LoadedVar
from .model import Param
from .naming import synthesize

BLANK = "_"


def qualify(type_expr: str, target_package: str) -> str:
    """Render a loader type expression for code living in `target_package`.

    The loader qualifies every named type with its package name; references to
    the target package itself lose the qualifier (`p.Item` -> `Item`).
    """
    if not target_package:
        return type_expr
    return re.sub(rf"(?<![\w.]){re.escape(target_package)}\.", "", type_expr)


def element_type(type_expr: str) -> str:
    """`[]T` -> `T` for the final parameter of a variadic signature."""
    if type_expr.startswith("[]"):
        return type_expr[2:]
    return type_expr


def normalize(
    var: LoadedVar,
    used_names: set[str],
    *,
    target_package: str,
    variadic: bool = False,
) -> Param:
    """Convert one loader parameter/result into a `Param`.

    Unnamed (or blank) entries get a synthesized name. The chosen name is added
    to `used_names`.
    """
    typ = qualify(var.type, target_package)
    if variadic:
        typ = element_type(typ)

    name = var.name
    if not name or name == BLANK:
        name = synthesize(typ, used_names)
    used_names.add(name)

    return Param(name=name, type=typ, variadic=variadic)
