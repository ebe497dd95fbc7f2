"""Iteration over chains of exception causes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


def _error_source(error: Any) -> Any:
    """Return the error that caused *error*, or None when there is none."""
    cause = getattr(error, "__cause__", None)
    if cause is not None:
        return cause
    if getattr(error, "__suppress_context__", False):
        return None
    return getattr(error, "__context__", None)


def _walk(head: Any) -> Iterator[Any]:
    current = head
    while current is not None:
        yield current
        current = _error_source(current)


class Chain(Iterator[BaseException]):
    """Iterator over an error and the errors that caused it, outermost first.

    The chain can also be consumed from the innermost end with
    :meth:`next_back`; doing so walks the whole remaining chain once and
    buffers it.
    """

    def __init__(self, head: BaseException | None = None) -> None:
        self._next = head
        self._buffer: deque[BaseException] | None = None

    def __iter__(self) -> Chain:
        return self

    def __next__(self) -> BaseException:
        if self._buffer is not None:
            if not self._buffer:
                raise StopIteration
            return self._buffer.popleft()
        error = self._next
        if error is None:
            raise StopIteration
        self._next = _error_source(error)
        return error

    def __len__(self) -> int:
        if self._buffer is not None:
            return len(self._buffer)
        return sum(1 for _ in _walk(self._next))

    def next_back(self) -> BaseException:
        """Return the innermost error not yet yielded."""
        if self._buffer is None:
            self._buffer = deque(_walk(self._next))
            self._next = None
        if not self._buffer:
            raise StopIteration
        return self._buffer.pop()