import pytest

from diagkit.code import Code
from diagkit.diagnostic_arg import DiagnosticArg, parse_diagnostic_args
from diagkit.forward import Forward
from diagkit.severity import Severity


def test_code_and_help_in_order():
    args = parse_diagnostic_args(
        {"code": ("oops", "my", "bad"), "help": "try doing it better next time?"}
    )
    assert [a.kind for a in args] == ["code", "help"]
    assert args[0].value == Code("oops::my::bad")
    assert args[1].value.display.fmt == "try doing it better next time?"


def test_severity_alias():
    (arg,) = parse_diagnostic_args({"severity": "warn"})
    assert arg.value is Severity.WARNING


def test_invalid_severity():
    with pytest.raises(ValueError, match="Invalid severity level"):
        parse_diagnostic_args({"severity": "fatal"})


def test_transparent():
    (arg,) = parse_diagnostic_args({"transparent": True})
    assert arg == DiagnosticArg("transparent")
    assert arg.is_transparent
    assert parse_diagnostic_args({"transparent": False}) == []


def test_transparent_must_be_bool():
    with pytest.raises(ValueError):
        parse_diagnostic_args({"transparent": "yes"})


def test_forward_and_url():
    args = parse_diagnostic_args([("forward", "inner"), ("url", True)])
    assert args[0].value == Forward("inner")
    assert args[1].value.docs_link is True
    assert not args[0].is_transparent


def test_unknown_option():
    with pytest.raises(ValueError, match="Unrecognized diagnostic option"):
        parse_diagnostic_args({"colour": "red"})


def test_repeated_pairs_are_kept():
    args = parse_diagnostic_args([("code", "a"), ("code", "b")])
    assert [a.value for a in args] == [Code("a"), Code("b")]


def test_empty_options():
    assert parse_diagnostic_args({}) == []