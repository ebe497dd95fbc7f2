"""Forwarding diagnostic methods to a field of the diagnostic."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class WhichFn(Enum):
    """The diagnostic methods that may be forwarded; values are method names."""

    CODE = "code"
    HELP = "help"
    URL = "url"
    SEVERITY = "severity"
    LABELS = "labels"
    SOURCE_CODE = "source_code"
    RELATED = "related"
    DIAGNOSTIC_SOURCE = "diagnostic_source"


@dataclass(frozen=True)
class Forward:
    """Delegate diagnostic methods to the field named or indexed by ``member``."""

    member: str | int

    @classmethod
    def parse(cls, value: str | int | Forward) -> Forward:
        """Build a forward from a field name or a field index."""
        if isinstance(value, Forward):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise ValueError("forward index must not be negative")
            return cls(value)
        if isinstance(value, str) and value.isidentifier():
            return cls(value)
        raise ValueError("forward expects a field name or a field index")

    @classmethod
    def for_transparent_field(cls, fields: Iterable[Any]) -> Forward:
        """Forward to the only field of a transparent diagnostic."""
        fields = list(fields)
        if not fields:
            raise ValueError(
                "you cannot use transparent with a class that has no fields"
            )
        if len(fields) != 1:
            raise ValueError("you can only use transparent with exactly one field")
        only = fields[0]
        return cls(only.name if isinstance(only, dataclasses.Field) else only)

    def _target(self, obj: Any) -> Any:
        if isinstance(self.member, str):
            return getattr(obj, self.member)
        if dataclasses.is_dataclass(obj):
            return getattr(obj, dataclasses.fields(obj)[self.member].name)
        return obj[self.member]

    def call(self, obj: Any, which_fn: WhichFn | str) -> Any:
        """Call the forwarded method on the field; None if it has no such method."""
        method = getattr(self._target(obj), WhichFn(which_fn).value, None)
        return method() if callable(method) else None