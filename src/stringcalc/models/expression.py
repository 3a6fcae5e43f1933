"""Parsed expression model: the resolved separator and the body it splits."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsedExpression(BaseModel):
    """An expression with its separator header resolved and stripped."""

    separator: str = Field(min_length=1)
    body: str = ""
    declared: bool = False  # True when the separator came from a `//` header

    model_config = {"frozen": True}
