"""Format strings that refer to the fields of a diagnostic."""

from __future__ import annotations

import string
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

Member = Union[str, int]

_MAX_INDEX = 2**32 - 1
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def take_int(read: str) -> tuple[str, str]:
    """Split leading ASCII digits off *read*, returning (digits, rest)."""
    rest = read.lstrip(string.digits)
    return read[: len(read) - len(rest)], rest


def take_ident(read: str) -> tuple[str, str]:
    """Split a leading identifier (optionally ``r#``-prefixed) off *read*."""
    prefix = ""
    if read.startswith("r#"):
        prefix, read = "r#", read[2:]
    end = next((i for i, ch in enumerate(read) if ch not in _IDENT_CHARS), len(read))
    name = read[:end]
    if not name or name[0] not in _IDENT_START:
        raise ValueError(f"not an identifier: {prefix + name!r}")
    return prefix + name, read[end:]


@dataclass
class Display:
    """A format string with explicit arguments and field shorthands."""

    fmt: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    has_bonus_display: bool = False
    bindings: dict[str, Member] = field(default_factory=dict)

    def expand_shorthand(self, members: Collection[Member]) -> None:
        """Rewrite ``{field}`` and ``{0}`` shorthands into bound names.

        Names are bound to fields of the diagnostic; indices that are not
        fields stay positional. A malformed string is left untouched.
        """
        named = set(self.kwargs) | set(self.bindings)
        bindings = dict(self.bindings)
        has_bonus_display = False
        read = self.fmt
        out: list[str] = []

        while (brace := read.find("{")) != -1:
            out.append(read[: brace + 1])
            read = read[brace + 1 :]
            if read.startswith("{"):
                out.append("{")
                read = read[1:]
                continue
            if not read:
                return
            first = read[0]
            member: Member
            if first in string.digits:
                digits, read = take_int(read)
                index = int(digits)
                if index > _MAX_INDEX:
                    return
                if index not in members:
                    out.append(digits)
                    continue
                member = index
            elif first in _IDENT_START:
                member, read = take_ident(read)
            else:
                continue

            local = f"_{member}" if isinstance(member, int) else member
            formatvar = local
            if formatvar.startswith("r#"):
                formatvar = "r_" + formatvar[2:]
            if formatvar.startswith("_"):
                formatvar = "field_" + formatvar
            out.append(formatvar)
            if formatvar in named:
                continue
            named.add(formatvar)
            bindings[formatvar] = member
            if read.startswith("}") and member in members:
                has_bonus_display = True

        out.append(read)
        self.fmt = "".join(out)
        self.bindings = bindings
        self.has_bonus_display = has_bonus_display

    def render(self, values: Mapping[Member, Any] | None = None) -> str:
        """Format the string, taking bound fields from *values*."""
        values = values or {}
        bound = {var: values[member] for var, member in self.bindings.items()}
        return self.fmt.format(*self.args, **self.kwargs, **bound)