"""Severity levels of diagnostics."""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    ADVICE = "advice"


_ALIASES = {
    "error": Severity.ERROR,
    "err": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "advice": Severity.ADVICE,
    "adv": Severity.ADVICE,
    "info": Severity.ADVICE,
}


def parse_severity(text: str | Severity) -> Severity:
    """Parse a severity name or alias, ignoring case."""
    if isinstance(text, Severity):
        return text
    try:
        return _ALIASES[text.lower()]
    except KeyError:
        raise ValueError(
            "Invalid severity level. Only Error, Warning, and Advice are supported."
        ) from None