"""Help text of a diagnostic."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from diagkit.fmt import Display
from diagkit.utils import _as_display, _field_spec, _render_display

_INVALID = "help must be a format string or a (format, *args) tuple"


@dataclass(frozen=True)
class Help:
    """Help given either by a format string or by the value of a field."""

    display: Display | None = None
    field: str | None = None

    def __post_init__(self) -> None:
        if (self.display is None) == (self.field is None):
            raise ValueError("help needs exactly one of a display or a field")

    @classmethod
    def parse(cls, value: Any) -> Help:
        """Build help from a format string, tuple or Display."""
        if isinstance(value, Help):
            return value
        return cls(display=_as_display(value, _INVALID))

    @classmethod
    def from_fields(cls, fields: Iterable[Any]) -> Help | None:
        """Take help from the first field marked as help, if any."""
        for field in fields:
            spec = _field_spec(field)
            if spec is not None and spec.help:
                return cls(field=field.name)
        return None

    def render(self, obj: Any) -> str | None:
        """The help text for *obj*; None when the help field holds None."""
        if self.field is not None:
            value = getattr(obj, self.field)
            return None if value is None else str(value)
        return _render_display(self.display, obj)