"""The diagnostic that caused another diagnostic."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from diagkit.utils import _field_spec


@dataclass(frozen=True)
class DiagnosticSource:
    """The field that holds the diagnostic this one was caused by."""

    member: str

    @classmethod
    def from_fields(
        cls, fields: Iterable[dataclasses.Field]
    ) -> DiagnosticSource | None:
        """The first field marked as the diagnostic source, if any."""
        for field in fields:
            spec = _field_spec(field)
            if spec is not None and spec.diagnostic_source:
                return cls(field.name)
        return None

    def get(self, obj: Any) -> Any:
        """The diagnostic source of *obj*."""
        return getattr(obj, self.member)