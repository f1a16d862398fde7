from __future__ import annotations
from enum import IntEnum

class IntWidth(IntEnum):
    """Two's-complement integer widths supported by the numeric parsers."""
    INT32 = 32
    INT64 = 64

    @property
    def max_value(self) -> int:
        return (1 << (self.value - 1)) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.value - 1))

    @property
    def hex_mask(self) -> int:
        # top nibble; a shift with any of these bits set would overflow
        return 0xF << (self.value - 4)
