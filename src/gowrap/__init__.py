"""gowrap: generate Go wrappers for a type's method set from Jinja2 templates."""

from __future__ import annotations

from . import errors
from .pipeline import generate
from .model import Method, Param, WrappedType
from .resolver import resolve

__all__ = [
    "Method",
    "Param",
    "WrappedType",
    "errors",
    "generate",
    "resolve",
]
