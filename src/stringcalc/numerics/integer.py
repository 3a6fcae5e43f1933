"""Integer numeric kinds implementing INumericType."""

from __future__ import annotations

import re

_UNSIGNED_LITERAL = re.compile(r"\+?[0-9]+")
_SIGNED_LITERAL = re.compile(r"[+-]?[0-9]+")


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


class FixedWidthInteger:
    """Two's-complement style integer of a fixed bit width.

    Accepts an optional sign followed by ASCII digits, nothing else. ``int()``
    alone would also take whitespace, underscores and non-ASCII digits.
    """

    def __init__(self, bits: int, signed: bool = False) -> None:
        if bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        self.bits = bits
        self.signed = signed
        self.name = f"{'i' if signed else 'u'}{bits}"
        if signed:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = (1 << bits) - 1
        self._literal = _SIGNED_LITERAL if signed else _UNSIGNED_LITERAL

    def __repr__(self) -> str:
        return f"FixedWidthInteger(bits={self.bits}, signed={self.signed})"

    def zero(self) -> int:
        return 0

    def parse(self, text: str) -> int:
        if not self._literal.fullmatch(text):
            raise ValueError(f"invalid digit found in {text!r}")
        value = int(text)
        if not self.min_value <= value <= self.max_value:
            raise ValueError(f"{text!r} is out of range for {self.name}")
        return value

    def add(self, a: int, b: int) -> int:
        total = a + b
        if not self.min_value <= total <= self.max_value:
            raise OverflowError(f"{a} + {b} does not fit in {self.name}")
        return total

    def compare(self, a: int, b: int) -> int:
        return _compare(a, b)


class UnboundedInteger:
    """Python's arbitrary-precision int; never overflows."""

    name = "int"

    def __repr__(self) -> str:
        return "UnboundedInteger()"

    def zero(self) -> int:
        return 0

    def parse(self, text: str) -> int:
        if not _SIGNED_LITERAL.fullmatch(text):
            raise ValueError(f"invalid digit found in {text!r}")
        return int(text)

    def add(self, a: int, b: int) -> int:
        return a + b

    def compare(self, a: int, b: int) -> int:
        return _compare(a, b)


U8 = FixedWidthInteger(8)
U16 = FixedWidthInteger(16)
U32 = FixedWidthInteger(32)
U64 = FixedWidthInteger(64)
I8 = FixedWidthInteger(8, signed=True)
I16 = FixedWidthInteger(16, signed=True)
I32 = FixedWidthInteger(32, signed=True)
I64 = FixedWidthInteger(64, signed=True)
BIGINT = UnboundedInteger()
