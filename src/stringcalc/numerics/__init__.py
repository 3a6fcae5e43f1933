"""Numeric kinds selectable by name behind the INumericType Protocol."""

from __future__ import annotations

from stringcalc.core.exceptions import UnknownNumericTypeError
from stringcalc.core.protocols import INumericType
from stringcalc.core.types import NumericName
from stringcalc.numerics.integer import (
    BIGINT,
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    FixedWidthInteger,
    UnboundedInteger,
)

NUMERIC_KINDS: dict[str, INumericType] = {
    kind.name: kind for kind in (U8, U16, U32, U64, I8, I16, I32, I64, BIGINT)
}


def create_numeric(name: NumericName | INumericType) -> INumericType:
    """Resolve a numeric kind by name; kind objects pass through unchanged."""
    if not isinstance(name, str):
        return name
    try:
        return NUMERIC_KINDS[name.lower()]
    except KeyError:
        raise UnknownNumericTypeError(name, sorted(NUMERIC_KINDS)) from None


__all__ = [
    "NUMERIC_KINDS",
    "FixedWidthInteger",
    "UnboundedInteger",
    "create_numeric",
]
