"""Diagnostic codes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_REQUIRED = (
    "diagnostic code is required. Use code='...' or code=('path', 'segments') "
    "to define one."
)


@dataclass(frozen=True)
class Code:
    """A diagnostic code such as ``oops::my::bad``."""

    value: str

    @classmethod
    def parse(cls, value: str | Sequence[str] | Code) -> Code:
        """Build a code from a string or from path segments joined by ``::``."""
        if isinstance(value, Code):
            return value
        if isinstance(value, str):
            return cls(value)
        if (
            isinstance(value, (tuple, list))
            and value
            and all(isinstance(seg, str) and seg.isidentifier() for seg in value)
        ):
            return cls("::".join(value))
        raise ValueError(_REQUIRED)

    def __str__(self) -> str:
        return self.value