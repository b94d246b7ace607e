"""Read-only Go type model and the loaders that produce it."""

from __future__ import annotations

from .scan import GoTypeLoader
from .symbols import (
    InterfaceMethod,
    LoadedMethod,
    LoadedPackage,
    LoadedSignature,
    LoadedType,
    LoadedVar,
    LoadResult,
    TypeLoader,
)

__all__ = [
    "GoTypeLoader",
    "InterfaceMethod",
    "LoadResult",
    "LoadedMethod",
    "LoadedPackage",
    "LoadedSignature",
    "LoadedType",
    "LoadedVar",
    "TypeLoader",
]
