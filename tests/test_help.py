from dataclasses import dataclass

import pytest

from diagkit.fmt import Display
from diagkit.help import Help
from diagkit.utils import diagnostic_field


@dataclass
class WithHint:
    name: str = "x"
    hint: object = diagnostic_field(help=True, default=None)


@dataclass
class NoHint:
    name: str = "x"


def test_plain_string():
    text = "try doing it better next time?"
    assert Help.parse(text).render(NoHint()) == text


def test_field_shorthand():
    assert Help.parse("use {name} instead").render(NoHint(name="y")) == "use y instead"


def test_positional_args():
    assert Help.parse(("expected {}", 3)).render(NoHint()) == "expected 3"


def test_parse_display_and_help():
    display = Display("fixed")
    assert Help.parse(display).display is display
    existing = Help(field="hint")
    assert Help.parse(existing) is existing


def test_parse_rejects_other_values():
    with pytest.raises(ValueError):
        Help.parse(42)


def test_from_fields_finds_help():
    help_ = Help.from_fields(WithHint.__dataclass_fields__.values())
    assert help_ == Help(field="hint")
    assert help_.render(WithHint(hint="look closer")) == "look closer"
    assert help_.render(WithHint(hint=None)) is None


def test_from_fields_without_help():
    assert Help.from_fields(NoHint.__dataclass_fields__.values()) is None


def test_render_leaves_display_untouched():
    help_ = Help.parse("use {name}")
    help_.render(NoHint())
    assert help_.display.fmt == "use {name}"
    assert help_.display.bindings == {}


def test_exactly_one_source():
    with pytest.raises(ValueError):
        Help()
    with pytest.raises(ValueError):
        Help(display=Display("a"), field="b")