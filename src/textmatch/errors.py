from __future__ import annotations


class InvalidArgument(ValueError):
    pass


class OutOfRange(IndexError):
    pass


class NumberFormatError(ValueError):
    pass
