import dataclasses
from dataclasses import dataclass

from diagkit.diagnostic_source import DiagnosticSource
from diagkit.utils import diagnostic_field


@dataclass
class Inner:
    message: str


@dataclass
class Outer:
    message: str
    cause: Inner = diagnostic_field(diagnostic_source=True)
    other: Inner = diagnostic_field(diagnostic_source=True)


def test_first_marked_field_wins():
    assert DiagnosticSource.from_fields(dataclasses.fields(Outer)) == DiagnosticSource(
        "cause"
    )


def test_get_returns_inner_diagnostic():
    inner = Inner("very much went wrong")
    outer = Outer("oops!", inner, Inner("other"))
    source = DiagnosticSource.from_fields(dataclasses.fields(Outer))
    assert source.get(outer) is inner


def test_no_diagnostic_source():
    assert DiagnosticSource.from_fields(dataclasses.fields(Inner)) is None