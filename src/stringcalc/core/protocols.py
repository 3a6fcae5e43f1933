"""Protocol interfaces for stringcalc abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Numeric kind
# ---------------------------------------------------------------------------

@runtime_checkable
class INumericType(Protocol[T]):
    """Capabilities a value type needs to be summed.

    ``parse`` raises ``ValueError`` on malformed text, ``add`` raises
    ``OverflowError`` when the result does not fit.
    """

    name: str

    def zero(self) -> T: ...

    def add(self, a: T, b: T) -> T: ...

    def parse(self, text: str) -> T: ...

    def compare(self, a: T, b: T) -> int: ...


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

@runtime_checkable
class ICalculator(Protocol[T]):
    """Anything that sums a delimited number string."""

    def add(self, expression: str) -> T: ...
