from __future__ import annotations
from typing import TextIO
from .errors import InvalidArgument, OutOfRange
from .models.common import IntWidth
from .models.span import Span
from .numeric import is_digit, is_hex_digit, parse_decimal, parse_hex
from .predicate import CharTest
from .view import BoundedView


def _require_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise InvalidArgument(f"expected a single character, got {ch!r}")
    return ch


class Matcher:
    """
    Cursor over an immutable string for hand-written parsers.

    ``start`` marks the beginning of the run consumed by the latest match or
    skip and ``index`` the next character to examine; ``0 <= start <= index
    <= length`` always holds.

    ``match_*`` methods return ``False`` and leave the cursor alone when the
    text does not match. ``skip_*`` methods always succeed. After either,
    the consumed run is available through the result accessors.
    """
    __slots__ = ("_text", "_length", "_start", "_index")

    def __init__(self, text: str):
        if text is None:
            raise InvalidArgument("Matcher text must not be None")
        if not isinstance(text, str):
            raise InvalidArgument(f"Matcher text must be str, not {type(text).__name__}")
        self._text = text
        self._length = len(text)
        self._start = 0
        self._index = 0

    def __repr__(self) -> str:
        return f"Matcher(start={self._start}, index={self._index}, length={self._length})"

    def __len__(self) -> int: return self._length

    @property
    def text(self) -> str: return self._text
    @property
    def length(self) -> int: return self._length

    # ---- position control ----

    def _check_offset(self, name: str, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgument(f"{name} must be int, not {type(value).__name__}")
        if not (0 <= value <= self._length):
            raise OutOfRange(f"{name} {value} out of range 0..{self._length}")

    @property
    def start(self) -> int:
        return self._start

    @start.setter
    def start(self, start: int) -> None:
        self._check_offset("start", start)
        self._start = start
        if self._index < start:
            self._index = start

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, index: int) -> None:
        self._check_offset("index", index)
        self._index = index
        if index < self._start:
            self._start = index

    def is_at_end(self) -> bool:
        return self._index >= self._length

    def revert(self) -> None:
        """Undo the advance of the last match; ``start`` is kept."""
        self._index = self._start

    def char_at(self, index: int) -> str:
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidArgument(f"index must be int, not {type(index).__name__}")
        if not (0 <= index < self._length):
            raise OutOfRange(f"index {index} out of range 0..{self._length - 1}")
        return self._text[index]

    # ---- match family ----

    def _accept(self, end: int) -> bool:
        self._start = self._index
        self._index = end
        return True

    def match_char(self, ch: str) -> bool:
        _require_char(ch)
        if self._index >= self._length or self._text[self._index] != ch:
            return False
        return self._accept(self._index + 1)

    def match_char_if(self, predicate: CharTest) -> bool:
        if self._index >= self._length or not predicate(self._text[self._index]):
            return False
        return self._accept(self._index + 1)

    def match_literal(self, seq: str) -> bool:
        if not self._text.startswith(seq, self._index):
            return False
        return self._accept(self._index + len(seq))

    def match_one_of(self, charset: str) -> bool:
        if self._index >= self._length or self._text[self._index] not in charset:
            return False
        return self._accept(self._index + 1)

    def _scan(self, predicate: CharTest, max_chars: int) -> int:
        i = self._index
        stopper = min(self._length, i + max_chars) if max_chars > 0 else self._length
        text = self._text
        while i < stopper and predicate(text[i]):
            i += 1
        return i

    def match_while(self, predicate: CharTest, max_chars: int = 0, min_chars: int = 1) -> bool:
        """
        Match a run of characters satisfying ``predicate``.

        Stops at the first failing character, at end of text, or after
        ``max_chars`` characters (0 means no limit). Fails, consuming nothing,
        when fewer than ``min_chars`` were found; ``min_chars=0`` always
        succeeds.
        """
        end = self._scan(predicate, max_chars)
        if end - self._index < min_chars:
            return False
        return self._accept(end)

    def match_dec(self, max_digits: int = 0, min_digits: int = 1) -> bool:
        return self.match_while(is_digit, max_digits, min_digits)

    def match_hex(self, max_digits: int = 0, min_digits: int = 1) -> bool:
        return self.match_while(is_hex_digit, max_digits, min_digits)

    def match_continuation(self, predicate: CharTest, max_chars: int = 0, min_chars: int = 0) -> bool:
        """
        Extend the run of the preceding match without moving ``start``.

        On failure ``index`` is rewound to ``start``, discarding the earlier
        match too, so a two-part token either matches whole or not at all::

            m.match_char("%") and m.match_continuation(HEX_DIGIT, 2, 2)
        """
        end = self._scan(predicate, max_chars)
        if end - self._index < min_chars:
            self._index = self._start
            return False
        self._index = end
        return True

    # ---- skip family ----

    def skip_while_in(self, charset: str) -> None:
        self._start = i = self._index
        while i < self._length and self._text[i] in charset:
            i += 1
        self._index = i

    def skip_while(self, predicate: CharTest) -> None:
        self._start = self._index
        self._index = self._scan(predicate, 0)

    def skip_char(self, ch: str) -> None:
        _require_char(ch)
        self._start = i = self._index
        while i < self._length and self._text[i] == ch:
            i += 1
        self._index = i

    def skip_until_char(self, ch: str) -> None:
        _require_char(ch)
        self._start = self._index
        found = self._text.find(ch, self._index)
        self._index = self._length if found < 0 else found

    def skip_until(self, seq: str) -> None:
        """Advance to (not past) the next occurrence of ``seq``, or to end of text."""
        if len(seq) == 1:
            self.skip_until_char(seq)
            return
        self._start = self._index
        if not seq:
            return
        found = self._text.find(seq, self._index)
        self._index = self._length if found < 0 else found

    def skip_to_end(self) -> None:
        self._start = self._index
        self._index = self._length

    def skip_fixed(self, n: int) -> None:
        if n < 0:
            raise InvalidArgument(f"skip count must not be negative: {n}")
        end = self._index + n
        if end > self._length:
            raise OutOfRange(f"skip to {end} beyond end of text {self._length}")
        self._start = self._index
        self._index = end

    def next_char(self) -> str:
        if self._index >= self._length:
            raise OutOfRange(f"no character at end of text ({self._index})")
        self._start = self._index
        self._index += 1
        return self._text[self._start]

    # ---- results ----

    def _check_bounds(self, from_: int, to: int) -> None:
        if not (0 <= from_ <= to <= self._length):
            raise OutOfRange(f"substring {from_}:{to} out of range 0..{self._length}")

    @property
    def result_length(self) -> int:
        return self._index - self._start

    def get_result(self) -> str:
        return self._text[self._start:self._index]

    def result_view(self) -> BoundedView:
        return BoundedView(self._text, self._start, self._index)

    def result_first_char(self) -> str:
        if self._start >= self._length:
            raise OutOfRange(f"no result character at end of text ({self._start})")
        return self._text[self._start]

    def result_span(self) -> Span:
        return Span(start=self._start, end=self._index)

    def substring(self, from_: int, to: int) -> str:
        self._check_bounds(from_, to)
        return self._text[from_:to]

    def substring_view(self, from_: int, to: int) -> BoundedView:
        self._check_bounds(from_, to)
        return BoundedView(self._text, from_, to)

    def span_text(self, span: Span) -> str:
        return self.substring(span.start, span.end)

    def append_result_to(self, sink: TextIO) -> None:
        """
        Write the current result to ``sink`` via ``sink.write()``.

        The characters are sliced into one temporary ``str`` per call; errors
        raised by the sink propagate unchanged.
        """
        sink.write(self._text[self._start:self._index])

    def append_substring_to(self, sink: TextIO, from_: int, to: int) -> None:
        """Like ``append_result_to`` for ``text[from_:to]``; bounds are checked first."""
        self._check_bounds(from_, to)
        sink.write(self._text[from_:to])

    # ---- numeric conversion ----

    def get_int(self, from_: int, to: int, negative: bool = False) -> int:
        return parse_decimal(self._text, from_, to, negative=negative, width=IntWidth.INT32)

    def get_long(self, from_: int, to: int, negative: bool = False) -> int:
        return parse_decimal(self._text, from_, to, negative=negative, width=IntWidth.INT64)

    def get_hex_int(self, from_: int, to: int) -> int:
        return parse_hex(self._text, from_, to, width=IntWidth.INT32)

    def get_hex_long(self, from_: int, to: int) -> int:
        return parse_hex(self._text, from_, to, width=IntWidth.INT64)

    def get_result_int(self, negative: bool = False) -> int:
        return self.get_int(self._start, self._index, negative)

    def get_result_long(self, negative: bool = False) -> int:
        return self.get_long(self._start, self._index, negative)

    def get_result_hex_int(self) -> int:
        return self.get_hex_int(self._start, self._index)

    def get_result_hex_long(self) -> int:
        return self.get_hex_long(self._start, self._index)
