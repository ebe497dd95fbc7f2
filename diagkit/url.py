"""Documentation links of a diagnostic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from diagkit.fmt import Display
from diagkit.utils import _as_display, _render_display

_DOCS_TEMPLATE = (
    "https://docs.example.com/{crate_name}/{crate_version}/{mod_name}/{item_path}"
)
_INVALID = (
    "Invalid argument to url(). It must be either a format string or True "
    "for a generated documentation link"
)


@dataclass(frozen=True)
class Url:
    """A url given by a format string, or a generated documentation link."""

    display: Display | None = None
    docs_link: bool = False

    def __post_init__(self) -> None:
        if (self.display is None) != self.docs_link:
            raise ValueError("url needs exactly one of a display or a docs link")

    @classmethod
    def parse(cls, value: Any) -> Url:
        """Build a url from a format string, tuple, Display, or True."""
        if isinstance(value, Url):
            return value
        if value is True:
            return cls(docs_link=True)
        return cls(display=_as_display(value, _INVALID))

    def render(
        self, obj: Any, type_name: str | None = None, variant: str | None = None
    ) -> str:
        """The url for *obj*; generated links name the type and variant."""
        if self.display is not None:
            return _render_display(self.display, obj)
        name = type_name or type(obj).__name__
        if variant is None:
            item_path = f"struct.{name}.html"
        else:
            item_path = f"enum.{name}.html#variant.{variant}"
        crate_name = type(obj).__module__.split(".")[0]
        return _DOCS_TEMPLATE.format(
            crate_name=crate_name,
            crate_version="latest",
            mod_name=crate_name.replace("-", "_"),
            item_path=item_path,
        )