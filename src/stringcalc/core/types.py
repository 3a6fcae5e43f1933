"""Type aliases used across stringcalc."""

from __future__ import annotations

Expression = str
Separator = str
Token = str
NumericName = str
