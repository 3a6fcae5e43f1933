"""Tokenizer: newline normalization and splitting."""

from __future__ import annotations

from stringcalc.core.types import Separator, Token
from stringcalc.models.expression import ParsedExpression
from stringcalc.parsing.separators import NEWLINE


def normalize_newlines(body: str, separator: Separator) -> str:
    """Rewrite every newline in ``body`` as ``separator``."""
    return body.replace(NEWLINE, separator)


def tokenize(parsed: ParsedExpression) -> list[Token]:
    """Split the body on the resolved separator, newlines included."""
    return normalize_newlines(parsed.body, parsed.separator).split(parsed.separator)
