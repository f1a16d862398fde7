import pytest
from pydantic import ValidationError

from textmatch.matcher import Matcher
from textmatch.models.span import Span


def test_span_validation():
    s = Span(start=2, end=5)
    assert s.length == 3
    with pytest.raises(ValidationError):
        Span(start=5, end=2)
    with pytest.raises(ValidationError):
        Span(start=-1, end=2)


def test_span_is_frozen():
    s = Span(start=0, end=1)
    with pytest.raises(ValidationError):
        s.start = 1


def test_result_span_round_trips_through_matcher():
    m = Matcher("GET /index.html HTTP/1.1")
    assert m.match_while(str.isupper)
    m.skip_while_in(" ")
    m.skip_until_char(" ")
    path = m.result_span()
    assert path.model_dump() == {"start": 4, "end": 15}
    assert m.span_text(path) == "/index.html"
