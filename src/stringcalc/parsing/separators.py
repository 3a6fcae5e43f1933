"""Separator resolution: read an optional `//` header off the expression.

Header forms::

    //;\\n1;2          single-character separator
    //[sep]\\n1sep2    bracketed separator of any length

Without a header the configured default separator applies.
"""

from __future__ import annotations

from stringcalc.core.exceptions import SeparatorHeaderError
from stringcalc.core.types import Expression, Separator
from stringcalc.models.expression import ParsedExpression

NEWLINE = "\n"
DEFAULT_SEPARATOR = ","
HEADER_MARKER = "//"


def resolve_separator(
    expression: Expression,
    default: Separator = DEFAULT_SEPARATOR,
    marker: str = HEADER_MARKER,
) -> ParsedExpression:
    """Split ``expression`` into its active separator and the remaining body.

    Raises:
        SeparatorHeaderError: the header has no terminating newline, or
            declares an empty separator.
    """
    if not expression.startswith(marker):
        return ParsedExpression(separator=default, body=expression)

    newline_at = expression.find(NEWLINE, len(marker))
    if newline_at == -1:
        raise SeparatorHeaderError(expression, "no newline after separator declaration")

    declaration = expression[len(marker):newline_at]
    body = expression[newline_at + 1:]

    if not declaration:
        raise SeparatorHeaderError(declaration, "empty separator declaration")

    if len(declaration) >= 2 and declaration[0] == "[" and declaration[-1] == "]":
        separator = declaration[1:-1]
        if not separator:
            raise SeparatorHeaderError(declaration, "empty bracketed separator")
    else:
        separator = declaration[0]

    return ParsedExpression(separator=separator, body=body, declared=True)
