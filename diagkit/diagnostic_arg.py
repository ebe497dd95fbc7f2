"""Options given to the diagnostic decorator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable

from diagkit.code import Code
from diagkit.forward import Forward
from diagkit.help import Help
from diagkit.severity import parse_severity
from diagkit.url import Url

_PARSERS: dict[str, Callable[[Any], Any]] = {
    "forward": Forward.parse,
    "code": Code.parse,
    "severity": parse_severity,
    "help": Help.parse,
    "url": Url.parse,
}


@dataclass(frozen=True)
class DiagnosticArg:
    """One parsed option: its kind and its parsed value."""

    kind: str
    value: Any = None

    @property
    def is_transparent(self) -> bool:
        return self.kind == "transparent"


def parse_diagnostic_args(
    options: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> list[DiagnosticArg]:
    """Parse decorator options, in order, into diagnostic arguments.

    Accepts a mapping or a sequence of ``(name, value)`` pairs; the latter
    may repeat a name, which later checks report.
    """
    items = options.items() if isinstance(options, Mapping) else options
    args: list[DiagnosticArg] = []
    for name, value in items:
        if name == "transparent":
            if not isinstance(value, bool):
                raise ValueError("transparent must be True or False")
            if value:
                args.append(DiagnosticArg("transparent"))
            continue
        parser = _PARSERS.get(name)
        if parser is None:
            raise ValueError(f"Unrecognized diagnostic option: {name!r}")
        args.append(DiagnosticArg(name, parser(value)))
    return args