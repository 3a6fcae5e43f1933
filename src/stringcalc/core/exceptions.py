"""stringcalc exception hierarchy."""

from __future__ import annotations


class StringCalcError(Exception):
    """Base exception for all stringcalc errors."""


class InvalidExpressionError(StringCalcError):
    """The input expression breaks the calculator's input contract."""


class SeparatorHeaderError(InvalidExpressionError):
    """The `//` separator declaration is malformed."""

    def __init__(self, header: str, message: str) -> None:
        self.header = header
        super().__init__(f"Malformed separator header {header!r}: {message}")


class NegativeNumbersError(InvalidExpressionError):
    """One or more tokens contain a minus sign."""

    def __init__(self, offenders: list[str]) -> None:
        self.offenders = list(offenders)
        super().__init__(f"negatives not allowed: {' '.join(self.offenders)}")


class TokenParseError(InvalidExpressionError):
    """A lone token could not be parsed as the requested numeric kind."""

    def __init__(self, token: str, numeric: str) -> None:
        self.token = token
        self.numeric = numeric
        super().__init__(f"Could not parse {token!r} as {numeric}")


class EmptyTokenStreamError(StringCalcError):
    """Tokenizing a non-empty expression produced no tokens."""


class NumericOverflowError(StringCalcError):
    """The running total left the range of the numeric kind."""

    def __init__(self, numeric: str, message: str) -> None:
        self.numeric = numeric
        super().__init__(f"{numeric} overflow: {message}")


class UnknownNumericTypeError(StringCalcError):
    """No numeric kind is registered under the requested name."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown numeric type {name!r}; expected one of: {', '.join(known)}")
