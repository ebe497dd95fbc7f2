import pytest

from diagkit.code import Code


def test_parse_string():
    code = Code.parse("oops::my::bad")
    assert code.value == "oops::my::bad"
    assert str(code) == "oops::my::bad"


def test_parse_path_segments():
    assert str(Code.parse(("oops", "my", "bad"))) == "oops::my::bad"
    assert Code.parse(["single"]) == Code("single")


def test_parse_code_is_identity():
    code = Code("x::y")
    assert Code.parse(code) is code


@pytest.mark.parametrize("value", [None, 42, (), ("ok", "not ok"), ("ok", 3)])
def test_invalid(value):
    with pytest.raises(ValueError, match="diagnostic code is required"):
        Code.parse(value)