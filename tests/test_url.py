from dataclasses import dataclass

import pytest

from diagkit.fmt import Display
from diagkit.url import Url


@dataclass
class MyBad:
    code: str = "oops"


class Unit:
    pass


def test_plain_url():
    assert Url.parse("https://example.com").render(Unit()) == "https://example.com"


def test_url_shorthand():
    url = Url.parse("https://example.com/{code}")
    assert url.render(MyBad(code="E1")) == "https://example.com/E1"


def test_generated_struct_link():
    link = Url.parse(True).render(MyBad())
    assert link.startswith("https://docs.example.com/")
    assert link.endswith("/struct.MyBad.html")


def test_generated_variant_link():
    link = Url.parse(True).render(MyBad(), "Kind", "Bad")
    assert link.endswith("/enum.Kind.html#variant.Bad")


def test_type_name_override():
    assert Url(docs_link=True).render(Unit(), "Other").endswith("/struct.Other.html")


def test_parse_passthrough():
    existing = Url(docs_link=True)
    assert Url.parse(existing) is existing
    assert Url.parse(("https://example.com/{}", 7)).render(Unit()) == "https://example.com/7"


@pytest.mark.parametrize("bad", [False, 3.5, None, ()])
def test_parse_rejects(bad):
    with pytest.raises(ValueError):
        Url.parse(bad)


def test_exactly_one_source():
    with pytest.raises(ValueError):
        Url()
    with pytest.raises(ValueError):
        Url(display=Display("a"), docs_link=True)