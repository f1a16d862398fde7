from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
from .errors import InvalidArgument
from .numeric import is_digit, is_hex_digit

CharTest = Callable[[str], bool]


@dataclass(frozen=True)
class CharPredicate:
    """Single-character test that composes with ``~``, ``&`` and ``|``."""
    test: CharTest

    def __call__(self, ch: str) -> bool:
        return bool(self.test(ch))

    def negate(self) -> "CharPredicate":
        return negate(self)

    def and_(self, other: CharTest) -> "CharPredicate":
        return both(self, other)

    def or_(self, other: CharTest) -> "CharPredicate":
        return either(self, other)

    def __invert__(self) -> "CharPredicate": return negate(self)
    def __and__(self, other: CharTest) -> "CharPredicate": return both(self, other)
    def __or__(self, other: CharTest) -> "CharPredicate": return either(self, other)


def _require(other: CharTest | None) -> CharTest:
    if other is None:
        raise InvalidArgument("predicate must not be None")
    return other


def negate(p: CharTest) -> CharPredicate:
    p = _require(p)
    return CharPredicate(lambda ch: not p(ch))


def both(a: CharTest, b: CharTest) -> CharPredicate:
    a, b = _require(a), _require(b)
    return CharPredicate(lambda ch: a(ch) and b(ch))


def either(a: CharTest, b: CharTest) -> CharPredicate:
    a, b = _require(a), _require(b)
    return CharPredicate(lambda ch: a(ch) or b(ch))


def char_in(charset: str) -> CharPredicate:
    return CharPredicate(lambda ch: ch in charset)


DIGIT = CharPredicate(is_digit)
HEX_DIGIT = CharPredicate(is_hex_digit)
WHITESPACE = char_in(" \t\r\n")
