"""Labelled spans of source code attached to a diagnostic."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from diagkit.fmt import Display
from diagkit.utils import _field_spec, _render_display


@dataclass(frozen=True)
class SourceSpan:
    """A byte range of source code: where it starts and how long it is."""

    offset: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.offset + self.length


def _as_span(value: Any) -> SourceSpan:
    """Turn a span, an ``(offset, length)`` pair, a range or an offset into a span."""
    if isinstance(value, SourceSpan):
        return value
    if isinstance(value, range):
        return SourceSpan(value.start, value.stop - value.start)
    if isinstance(value, tuple) and len(value) == 2:
        offset, length = value
        return SourceSpan(int(offset), int(length))
    if isinstance(value, int) and not isinstance(value, bool):
        return SourceSpan(value, 0)
    raise TypeError(f"cannot make a source span from {value!r}")


@dataclass(frozen=True)
class LabeledSpan:
    """A span with an optional label, possibly marked as the primary one."""

    label: str | None
    span: SourceSpan
    primary: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "span", _as_span(self.span))

    @classmethod
    def new_with_span(cls, label: str | None, span: Any) -> LabeledSpan:
        return cls(label, _as_span(span))

    @classmethod
    def new_primary_with_span(cls, label: str | None, span: Any) -> LabeledSpan:
        return cls(label, _as_span(span), primary=True)

    @property
    def offset(self) -> int:
        return self.span.offset

    @property
    def length(self) -> int:
        return self.span.length


def to_labeled_span(value: Any) -> LabeledSpan:
    """Turn a labelled span or anything that converts to a span into a labelled span."""
    if isinstance(value, LabeledSpan):
        return value
    return LabeledSpan(None, _as_span(value))


class LabelType(Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    COLLECTION = "collection"


@dataclass(frozen=True)
class Label:
    """One field that supplies a label, and the text to give it."""

    member: str
    label: Display | None = None
    lbl_ty: LabelType = LabelType.DEFAULT


@dataclass(frozen=True)
class Labels:
    """All label fields of a diagnostic, in declaration order."""

    labels: tuple[Label, ...]

    @classmethod
    def from_fields(cls, fields: Iterable[dataclasses.Field]) -> Labels | None:
        """Collect the fields marked as labels; None when there are none."""
        labels: list[Label] = []
        for field in fields:
            spec = _field_spec(field)
            if spec is None or not spec.is_label:
                continue
            if spec.primary:
                lbl_ty = LabelType.PRIMARY
            elif spec.collection:
                lbl_ty = LabelType.COLLECTION
            else:
                lbl_ty = LabelType.DEFAULT
            if lbl_ty is LabelType.PRIMARY and any(
                label.lbl_ty is LabelType.PRIMARY for label in labels
            ):
                raise ValueError("Cannot have more than one primary label.")
            labels.append(Label(field.name, spec.label, lbl_ty))
        return cls(tuple(labels)) if labels else None

    def collect(self, obj: Any) -> list[LabeledSpan]:
        """The labelled spans of *obj*: single labels first, then collections."""
        singles: list[LabeledSpan] = []
        collected: list[LabeledSpan] = []
        for label in self.labels:
            text = None if label.label is None else _render_display(label.label, obj)
            value = getattr(obj, label.member)
            if label.lbl_ty is LabelType.COLLECTION:
                for item in value or ():
                    span = to_labeled_span(item)
                    if text is not None and span.label is None:
                        span = dataclasses.replace(span, label=text)
                    collected.append(span)
            elif value is not None:
                if label.lbl_ty is LabelType.PRIMARY:
                    singles.append(LabeledSpan.new_primary_with_span(text, value))
                else:
                    singles.append(LabeledSpan.new_with_span(text, value))
        return singles + collected