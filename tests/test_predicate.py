import pytest

from textmatch.errors import InvalidArgument
from textmatch.matcher import Matcher
from textmatch.predicate import (
    DIGIT,
    HEX_DIGIT,
    WHITESPACE,
    CharPredicate,
    both,
    char_in,
    either,
    negate,
)


def test_builtin_predicates():
    assert DIGIT("5") and not DIGIT("a")
    assert HEX_DIGIT("a") and not HEX_DIGIT("g")
    assert WHITESPACE("\t") and not WHITESPACE("x")


def test_methods_compose():
    upper = CharPredicate(str.isupper)
    assert upper.negate()("a")
    assert upper.and_(HEX_DIGIT)("B") and not upper.and_(HEX_DIGIT)("X")
    assert upper.or_(DIGIT)("7") and not upper.or_(DIGIT)("q")


def test_operators_compose():
    alnum = CharPredicate(str.isalpha) | DIGIT
    assert alnum("q") and alnum("3") and not alnum("_")
    assert (~DIGIT)("x")
    assert (HEX_DIGIT & ~DIGIT)("c") and not (HEX_DIGIT & ~DIGIT)("3")


def test_free_combinators():
    vowel = char_in("aeiou")
    assert both(vowel, str.islower)("e")
    assert either(vowel, DIGIT)("1")
    assert negate(vowel)("z")


def test_none_operand_rejected():
    with pytest.raises(InvalidArgument):
        DIGIT.and_(None)
    with pytest.raises(InvalidArgument):
        either(DIGIT, None)


def test_composed_predicate_drives_matcher():
    ident_part = CharPredicate(str.isalpha) | DIGIT | char_in("_")
    m = Matcher("snake_case1 rest")
    assert m.match_while(ident_part)
    assert m.get_result() == "snake_case1"
    m.skip_while(WHITESPACE)
    assert m.match_while(~WHITESPACE)
    assert m.is_at_end()
