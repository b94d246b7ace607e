"""Domain-specific errors for gowrap."""

from __future__ import annotations


class GoWrapError(Exception):
    """Base error for gowrap."""


class TypeNotFoundError(GoWrapError):
    """Raised when the requested type is not declared by any loaded package."""


class LoadError(GoWrapError):
    """Raised when Go packages cannot be loaded into a type model."""


class TemplateReadError(GoWrapError):
    """Raised when the template file cannot be read."""


class RenderError(GoWrapError):
    """Raised when the template fails to render against the wrapped type."""


class FormatError(GoWrapError):
    """Raised when the generated source cannot be formatted.

    The unformatted source is kept on the error so callers can show it.
    """

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source


class WriteError(GoWrapError):
    """Raised when the generated file cannot be written."""
