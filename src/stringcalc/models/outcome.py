"""Call results: the non-raising outcome and the per-token breakdown."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorKind(StrEnum):
    MALFORMED_HEADER = "MALFORMED_HEADER"
    NEGATIVE_NUMBERS = "NEGATIVE_NUMBERS"
    UNPARSEABLE_NUMBER = "UNPARSEABLE_NUMBER"
    EMPTY_TOKEN_STREAM = "EMPTY_TOKEN_STREAM"
    OVERFLOW = "OVERFLOW"


class CalculationError(BaseModel):
    """Structured description of a failed call."""

    kind: ErrorKind
    message: str
    offenders: list[str] = Field(default_factory=list)


class SumOutcome(BaseModel):
    """Either a summed value or the error that stopped the call."""

    expression: str
    value: Optional[Any] = None
    error: Optional[CalculationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise ValueError carrying the error message."""
        if self.error is not None:
            raise ValueError(f"{self.error.kind}: {self.error.message}")
        return self.value


class SumBreakdown(BaseModel):
    """How each token of an expression contributed to the total."""

    separator: str
    tokens: list[str] = Field(default_factory=list)
    accepted: list[Any] = Field(default_factory=list)
    unparseable: list[str] = Field(default_factory=list)  # coerced to zero
    over_bound: list[str] = Field(default_factory=list)  # coerced to zero
    total: Any = None

    @property
    def coerced_count(self) -> int:
        return len(self.unparseable) + len(self.over_bound)
