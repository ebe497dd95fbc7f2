"""Related diagnostics carried by a diagnostic."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from diagkit.utils import _field_spec


@dataclass(frozen=True)
class Related:
    """The field that holds a collection of related diagnostics."""

    member: str

    @classmethod
    def from_fields(cls, fields: Iterable[dataclasses.Field]) -> Related | None:
        """The first field marked as related, if any."""
        for field in fields:
            spec = _field_spec(field)
            if spec is not None and spec.related:
                return cls(field.name)
        return None

    def collect(self, obj: Any) -> list[Any]:
        """The related diagnostics of *obj*, in order."""
        return list(getattr(obj, self.member) or ())