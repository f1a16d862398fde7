from __future__ import annotations
from typing import Iterator
from .errors import OutOfRange


class BoundedView:
    """
    Read-only window ``[start, end)`` over a backing string.

    Length, character access and sub-views work against the backing text
    directly; characters are only copied out by ``str()`` (or iteration).
    Offsets are relative to the view and must be non-negative.
    """
    __slots__ = ("_text", "_start", "_end")

    def __init__(self, text: str, start: int, end: int):
        if not (0 <= start <= end <= len(text)):
            raise OutOfRange(f"view {start}:{end} outside 0..{len(text)}")
        self._text = text
        self._start = start
        self._end = end

    @property
    def start(self) -> int: return self._start
    @property
    def end(self) -> int: return self._end

    def __len__(self) -> int:
        return self._end - self._start

    def char_at(self, index: int) -> str:
        if not (0 <= index < self._end - self._start):
            raise OutOfRange(f"index {index} outside view of length {len(self)}")
        return self._text[self._start + index]

    def sub_view(self, start: int, end: int) -> "BoundedView":
        if not (0 <= start <= end <= len(self)):
            raise OutOfRange(f"sub-view {start}:{end} outside 0..{len(self)}")
        return BoundedView(self._text, self._start + start, self._start + end)

    def __getitem__(self, key: int | slice):
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise OutOfRange("views do not support stepped slices")
            start = 0 if key.start is None else key.start
            end = len(self) if key.stop is None else key.stop
            return self.sub_view(start, end)
        return self.char_at(key)

    def __iter__(self) -> Iterator[str]:
        for i in range(self._start, self._end):
            yield self._text[i]

    def __str__(self) -> str:
        return self._text[self._start:self._end]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedView):
            return len(self) == len(other) and str(self) == str(other)
        if isinstance(other, str):
            return len(self) == len(other) and self._text.startswith(other, self._start)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"BoundedView({str(self)!r}, start={self._start}, end={self._end})"
