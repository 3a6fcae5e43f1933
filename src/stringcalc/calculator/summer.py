"""NumberStringSummer: sums a delimited string of numbers.

Rules, applied in order on every call:

1. An empty expression sums to zero.
2. A ``//`` header may declare the separator (``//;\\n`` or ``//[sep]\\n``);
   otherwise the configured default (``,``) is used. Newlines always separate.
3. Any token containing ``-`` is rejected; all offenders are reported at once.
4. A lone token must parse. Among several tokens, unparseable ones count as
   zero.
5. Values above the upper bound (1000 by default) count as zero.
"""

from __future__ import annotations

from functools import reduce
from typing import Any

from stringcalc.core.config import CalculatorConfig
from stringcalc.core.exceptions import (
    EmptyTokenStreamError,
    NegativeNumbersError,
    NumericOverflowError,
    SeparatorHeaderError,
    StringCalcError,
    TokenParseError,
)
from stringcalc.core.logging_config import get_logger
from stringcalc.core.protocols import INumericType
from stringcalc.core.types import Expression, NumericName, Token
from stringcalc.models.outcome import CalculationError, ErrorKind, SumBreakdown, SumOutcome
from stringcalc.numerics import create_numeric
from stringcalc.parsing.separators import resolve_separator
from stringcalc.parsing.tokenizer import tokenize

logger = get_logger(__name__)

NEGATIVE_SIGN = "-"

_ERROR_KINDS: dict[type[StringCalcError], ErrorKind] = {
    SeparatorHeaderError: ErrorKind.MALFORMED_HEADER,
    NegativeNumbersError: ErrorKind.NEGATIVE_NUMBERS,
    TokenParseError: ErrorKind.UNPARSEABLE_NUMBER,
    EmptyTokenStreamError: ErrorKind.EMPTY_TOKEN_STREAM,
    NumericOverflowError: ErrorKind.OVERFLOW,
}


def find_offenders(tokens: list[Token]) -> list[Token]:
    """Tokens containing a minus sign, in their original order."""
    return [token for token in tokens if NEGATIVE_SIGN in token]


class NumberStringSummer:
    """Sums delimited number strings into a caller-chosen numeric kind.

    Holds only configuration; the separator is resolved per call, so one
    instance can be shared freely.
    """

    def __init__(
        self,
        numeric: NumericName | INumericType | None = None,
        *,
        config: CalculatorConfig | None = None,
    ) -> None:
        self._config = config or CalculatorConfig()
        self._numeric = create_numeric(numeric if numeric is not None else self._config.numeric)
        self._bound = self._resolve_bound(self._config.upper_bound)

    @property
    def numeric(self) -> INumericType:
        return self._numeric

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    def _resolve_bound(self, upper_bound: int) -> Any:
        """The bound as a value of the numeric kind, or None if none can exceed it."""
        try:
            return self._numeric.parse(str(upper_bound))
        except ValueError:
            logger.debug(
                "Upper bound %d does not fit %s; filter disabled", upper_bound, self._numeric.name,
            )
            return None

    def _exceeds_bound(self, value: Any) -> bool:
        return self._bound is not None and self._numeric.compare(value, self._bound) > 0

    def _accumulate(self, total: Any, value: Any) -> Any:
        try:
            return self._numeric.add(total, value)
        except OverflowError as exc:
            raise NumericOverflowError(self._numeric.name, str(exc)) from exc

    def breakdown(self, expression: Expression) -> SumBreakdown:
        """Sum ``expression`` and report how every token was treated.

        Raises:
            SeparatorHeaderError: malformed ``//`` header.
            NegativeNumbersError: one or more tokens contain ``-``.
            TokenParseError: a lone token is not a number.
            NumericOverflowError: the total does not fit the numeric kind.
        """
        zero = self._numeric.zero()
        if expression == "":
            return SumBreakdown(separator=self._config.default_separator, total=zero)

        parsed = resolve_separator(
            expression,
            default=self._config.default_separator,
            marker=self._config.header_marker,
        )
        tokens = tokenize(parsed)
        if not tokens:
            raise EmptyTokenStreamError(f"No tokens produced from {expression!r}")

        offenders = find_offenders(tokens)
        if offenders:
            logger.debug("Rejecting %d negative token(s): %s", len(offenders), offenders)
            raise NegativeNumbersError(offenders)

        result = SumBreakdown(separator=parsed.separator, tokens=tokens)

        if len(tokens) == 1:
            token = tokens[0]
            try:
                value = self._numeric.parse(token)
            except ValueError as exc:
                raise TokenParseError(token, self._numeric.name) from exc
            if self._exceeds_bound(value):
                result.over_bound.append(token)
                result.total = zero
            else:
                result.accepted.append(value)
                result.total = value
            return result

        for token in tokens:
            try:
                value = self._numeric.parse(token)
            except ValueError:
                result.unparseable.append(token)
                continue
            if self._exceeds_bound(value):
                result.over_bound.append(token)
            else:
                result.accepted.append(value)

        if result.coerced_count:
            logger.debug(
                "Coerced %d token(s) to zero (unparseable=%s, over_bound=%s)",
                result.coerced_count, result.unparseable, result.over_bound,
            )

        result.total = reduce(self._accumulate, result.accepted, zero)
        return result

    def add(self, expression: Expression) -> Any:
        """Return the sum of ``expression``; raises on invalid input."""
        return self.breakdown(expression).total

    def try_add(self, expression: Expression) -> SumOutcome:
        """Like ``add`` but reports failures inside the returned outcome."""
        try:
            return SumOutcome(expression=expression, value=self.add(expression))
        except StringCalcError as exc:
            kind = next(
                (k for cls, k in _ERROR_KINDS.items() if isinstance(exc, cls)),
                None,
            )
            if kind is None:
                raise
            return SumOutcome(
                expression=expression,
                error=CalculationError(
                    kind=kind,
                    message=str(exc),
                    offenders=getattr(exc, "offenders", []),
                ),
            )


def add(
    expression: Expression,
    numeric: NumericName | INumericType | None = None,
    config: CalculatorConfig | None = None,
) -> Any:
    """Sum ``expression`` with a one-off NumberStringSummer."""
    return NumberStringSummer(numeric, config=config).add(expression)
