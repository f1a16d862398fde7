import pytest

from textmatch.errors import OutOfRange
from textmatch.matcher import Matcher
from textmatch.view import BoundedView


def test_view_reads_backing_text():
    v = BoundedView("Hello, world!", 7, 12)
    assert len(v) == 5
    assert v.char_at(0) == "w"
    assert v[4] == "d"
    assert str(v) == "world"
    assert list(v) == ["w", "o", "r", "l", "d"]
    assert v == "world" and v != "worlds"


def test_view_bounds():
    v = BoundedView("abcdef", 1, 4)
    with pytest.raises(OutOfRange):
        v.char_at(3)
    with pytest.raises(OutOfRange):
        v[-1]
    with pytest.raises(OutOfRange):
        BoundedView("abc", 2, 1)
    with pytest.raises(OutOfRange):
        BoundedView("abc", 0, 4)


def test_sub_view():
    v = BoundedView("abcdef", 1, 5)    # "bcde"
    sub = v.sub_view(1, 3)
    assert str(sub) == "cd"
    assert (sub.start, sub.end) == (2, 4)
    assert v[2:] == "de"
    assert v[:0] == ""
    with pytest.raises(OutOfRange):
        v.sub_view(2, 5)
    with pytest.raises(OutOfRange):
        v.sub_view(3, 2)
    with pytest.raises(OutOfRange):
        v[::2]


def test_views_compare_and_hash_like_strings():
    a = BoundedView("xxabyy", 2, 4)
    b = Matcher("ab").substring_view(0, 2)
    assert a == b
    assert hash(a) == hash("ab")
    assert {a: 1}[b] == 1


def test_result_view_is_fixed_at_creation():
    m = Matcher("abc def")
    assert m.match_while(str.isalpha)
    v = m.result_view()
    m.skip_to_end()
    assert v == "abc"
