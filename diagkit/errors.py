"""Errors raised by diagnostic operations."""

from __future__ import annotations

_DOCS_BASE = "https://docs.example.com/diagkit/errors.html"


class DiagnosticError(Exception):
    """Base class for errors that also describe themselves as diagnostics."""

    _CODE: str | None = None
    _HELP: str | None = None

    def code(self) -> str | None:
        return self._CODE

    def help(self) -> str | None:
        return self._HELP

    def url(self) -> str:
        return f"{_DOCS_BASE}#variant.{type(self).__name__}"


class IoError(DiagnosticError):
    """Something went wrong while reading source code."""

    _CODE = "diagkit::io_error"

    def __init__(self, error: OSError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class OutOfBounds(DiagnosticError):
    """A span extends beyond the bounds of its source."""

    _CODE = "diagkit::span_out_of_bounds"
    _HELP = "Double-check your spans. Do you have an off-by-one error?"

    def __init__(self, message: str = "The given offset is outside the bounds of its Source") -> None:
        super().__init__(message)