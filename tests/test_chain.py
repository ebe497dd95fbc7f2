import pytest

from diagkit.chain import Chain


def _linked():
    inner = ValueError("inner")
    middle = KeyError("middle")
    outer = RuntimeError("outer")
    middle.__cause__ = inner
    outer.__cause__ = middle
    return outer, middle, inner


def test_iterates_outermost_first():
    outer, middle, inner = _linked()
    assert list(Chain(outer)) == [outer, middle, inner]


def test_len_counts_remaining():
    outer, _, _ = _linked()
    chain = Chain(outer)
    assert len(chain) == 3
    next(chain)
    assert len(chain) == 2


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert list(chain) == []


def test_next_back_walks_from_the_inside():
    outer, middle, inner = _linked()
    chain = Chain(outer)
    assert chain.next_back() is inner
    assert chain.next_back() is middle
    assert len(chain) == 1
    assert chain.next_back() is outer
    with pytest.raises(StopIteration):
        chain.next_back()


def test_mixed_ends():
    outer, middle, inner = _linked()
    chain = Chain(outer)
    assert next(chain) is outer
    assert chain.next_back() is inner
    assert list(chain) == [middle]


def test_context_is_followed():
    try:
        try:
            raise ValueError("first")
        except ValueError:
            raise RuntimeError("second")
    except RuntimeError as err:
        errors = list(Chain(err))
    assert [str(e) for e in errors] == ["second", "first"]


def test_suppressed_context_is_ignored():
    try:
        try:
            raise ValueError("first")
        except ValueError:
            raise RuntimeError("second") from None
    except RuntimeError as err:
        chain = Chain(err)
        assert len(chain) == 1
        assert list(chain) == [err]