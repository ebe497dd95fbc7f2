"""Marking dataclass fields with diagnostic roles and reading them back."""

from __future__ import annotations

import dataclasses
from dataclasses import MISSING, dataclass
from typing import Any

from diagkit.fmt import Display, Member

_METADATA_KEY = "diagkit"
_LABEL_ERROR = (
    "Invalid argument to label() attribute. The argument must be a literal "
    "string or either the keyword `primary` or `collection`."
)


@dataclass(frozen=True)
class _FieldSpec:
    """The diagnostic roles attached to one dataclass field."""

    is_label: bool = False
    label: Display | None = None
    primary: bool = False
    collection: bool = False
    help: bool = False
    related: bool = False
    source_code: bool = False
    diagnostic_source: bool = False


def _as_display(value: Any, error: str) -> Display:
    """Turn a string, a ``(fmt, *args)`` tuple or a Display into a Display."""
    if isinstance(value, Display):
        return value
    if isinstance(value, str):
        return Display(value)
    if isinstance(value, tuple) and value and isinstance(value[0], str):
        return Display(value[0], tuple(value[1:]))
    raise ValueError(error)


def _field_spec(field: dataclasses.Field) -> _FieldSpec | None:
    """Return the diagnostic roles of *field*, or None if it has none."""
    return field.metadata.get(_METADATA_KEY)


def _render_display(display: Display, obj: Any) -> str:
    """Render *display* against the fields of *obj* without changing it."""
    expanded = dataclasses.replace(display)
    expanded.expand_shorthand(set(field_members(obj)))
    return expanded.render(display_values(obj))


def diagnostic_field(
    *,
    label: bool | str | tuple | Display = False,
    primary: bool = False,
    collection: bool = False,
    help: bool = False,
    related: bool = False,
    source_code: bool = False,
    diagnostic_source: bool = False,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    """Declare a dataclass field that plays a role in a diagnostic.

    ``label`` may be True for an unlabelled span, or a format string (or
    ``(fmt, *args)`` tuple) for the label text. ``primary`` and
    ``collection`` imply a label and exclude each other.
    """
    if primary and collection:
        raise ValueError(_LABEL_ERROR)
    is_label = label is not False or primary or collection
    text: Display | None = None
    if label is not False and label is not True:
        text = _as_display(label, _LABEL_ERROR)
    spec = _FieldSpec(
        is_label=bool(is_label),
        label=text,
        primary=primary,
        collection=collection,
        help=help,
        related=related,
        source_code=source_code,
        diagnostic_source=diagnostic_source,
    )
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: spec},
    )


def field_members(cls: Any) -> tuple[str, ...]:
    """Names of the fields of a dataclass (or instance), in order.

    Anything that is not a dataclass has no fields.
    """
    if not dataclasses.is_dataclass(cls):
        return ()
    return tuple(f.name for f in dataclasses.fields(cls))


def display_values(obj: Any) -> dict[Member, Any]:
    """Map each field name of *obj* to its current value."""
    return {name: getattr(obj, name) for name in field_members(obj)}