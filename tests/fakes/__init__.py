"""Shared test doubles."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation


class RecordingNumeric:
    """Decimal-backed INumericType that records every call it receives."""

    name = "recording-decimal"

    def __init__(self) -> None:
        self.parsed: list[str] = []
        self.added: list[tuple[Decimal, Decimal]] = []

    def zero(self) -> Decimal:
        return Decimal("0")

    def parse(self, text: str) -> Decimal:
        self.parsed.append(text)
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"not a decimal: {text!r}") from exc
        if not value.is_finite():
            raise ValueError(f"not a finite decimal: {text!r}")
        return value

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        self.added.append((a, b))
        return a + b

    def compare(self, a: Decimal, b: Decimal) -> int:
        return (a > b) - (a < b)


__all__ = ["RecordingNumeric"]
