"""Iteration over chains of diagnostic sources."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from diagkit.chain import _error_source


@dataclass(frozen=True)
class ErrorKind:
    """One link of a diagnostic chain: a diagnostic or a plain error."""

    error: Any
    is_diagnostic: bool = False

    def nested(self) -> ErrorKind | None:
        """Return the next link, preferring a diagnostic source over a cause."""
        if self.is_diagnostic:
            getter = getattr(self.error, "diagnostic_source", None)
            inner = getter() if callable(getter) else None
            if inner is not None:
                return ErrorKind(inner, True)
        source = _error_source(self.error)
        return None if source is None else ErrorKind(source)

    def __str__(self) -> str:
        return str(self.error)


class DiagnosticChain(Iterator[ErrorKind]):
    """Iterator over a diagnostic and its nested sources."""

    def __init__(self, state: ErrorKind | None = None) -> None:
        self._state = state

    @classmethod
    def from_diagnostic(cls, head: Any) -> DiagnosticChain:
        return cls(ErrorKind(head, True))

    @classmethod
    def from_stderror(cls, head: BaseException) -> DiagnosticChain:
        return cls(ErrorKind(head))

    def __iter__(self) -> DiagnosticChain:
        return self

    def __next__(self) -> ErrorKind:
        current = self._state
        if current is None:
            raise StopIteration
        self._state = current.nested()
        return current

    def __len__(self) -> int:
        count = 0
        current = self._state
        while current is not None:
            count += 1
            current = current.nested()
        return count