"""The source code a diagnostic refers to."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from diagkit.utils import _field_spec


@dataclass(frozen=True)
class SourceCode:
    """The field that holds the diagnostic's source code."""

    member: str

    @classmethod
    def from_fields(cls, fields: Iterable[dataclasses.Field]) -> SourceCode | None:
        """The first field marked as source code, if any."""
        for field in fields:
            spec = _field_spec(field)
            if spec is not None and spec.source_code:
                return cls(field.name)
        return None

    def get(self, obj: Any) -> Any:
        """The source code of *obj*; None when the field holds none."""
        return getattr(obj, self.member)