from __future__ import annotations
import logging
from .errors import NumberFormatError, OutOfRange
from .models.common import IntWidth

logger = logging.getLogger(__name__)

# ASCII only; full-width and other Unicode digits are not digits here
_DEC_VALUES = {ch: i for i, ch in enumerate("0123456789")}
_HEX_VALUES = {
    **_DEC_VALUES,
    **{ch: 10 + i for i, ch in enumerate("abcdef")},
    **{ch: 10 + i for i, ch in enumerate("ABCDEF")},
}


def is_digit(ch: str) -> bool:
    return ch in _DEC_VALUES


def is_hex_digit(ch: str) -> bool:
    return ch in _HEX_VALUES


def digit_value(ch: str) -> int:
    try:
        return _DEC_VALUES[ch]
    except KeyError:
        raise NumberFormatError(f"illegal decimal digit {ch!r}") from None


def hex_digit_value(ch: str) -> int:
    try:
        return _HEX_VALUES[ch]
    except KeyError:
        raise NumberFormatError(f"illegal hexadecimal digit {ch!r}") from None


def _digit_at(convert, text: str, i: int, from_: int, to: int) -> int:
    try:
        return convert(text[i])
    except NumberFormatError:
        logger.debug("invalid digit %r in %r", text[i], text[from_:to])
        raise


def _check_range(text: str, from_: int, to: int) -> None:
    if to <= from_:
        raise NumberFormatError(f"empty digit range {from_}:{to}")
    if from_ < 0 or to > len(text):
        raise OutOfRange(f"digit range {from_}:{to} outside 0..{len(text)}")


def parse_decimal(
    text: str,
    from_: int,
    to: int,
    *,
    negative: bool = False,
    width: IntWidth = IntWidth.INT32,
) -> int:
    """
    Convert the decimal digits in ``text[from_:to]`` to an integer of the given width.

    The magnitude limit is checked before every accumulation step, so the
    negative range reaches ``width.min_value`` (one more than ``max_value``).
    Pass ``negative=True`` for a value whose minus sign the caller has
    already consumed; flipping the sign afterwards cannot express the minimum.
    """
    _check_range(text, from_, to)
    i = from_
    while text[i] == "0":
        i += 1
        if i == to:
            return 0

    limit = -width.min_value if negative else width.max_value
    value = 0
    while i < to:
        d = _digit_at(digit_value, text, i, from_, to)
        if value > (limit - d) // 10:
            logger.debug("decimal overflow in %r (%s bit)", text[from_:to], int(width))
            raise NumberFormatError(f"{text[from_:to]!r} exceeds {int(width)}-bit range")
        value = value * 10 + d
        i += 1
    return -value if negative else value


def parse_hex(text: str, from_: int, to: int, *, width: IntWidth = IntWidth.INT32) -> int:
    """Convert the hex digits in ``text[from_:to]``; the result is never negative."""
    _check_range(text, from_, to)
    mask = width.hex_mask
    value = _digit_at(hex_digit_value, text, from_, from_, to)
    for i in range(from_ + 1, to):
        if value & mask:
            logger.debug("hex overflow in %r (%s bit)", text[from_:to], int(width))
            raise NumberFormatError(f"{text[from_:to]!r} exceeds {int(width)}-bit range")
        value = value << 4 | _digit_at(hex_digit_value, text, i, from_, to)
    return value
