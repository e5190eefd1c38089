"""Evaluation of KMyMoney fraction expressions.

KMyMoney stores monetary values as small arithmetic expressions such as
``"-1234/100"`` or ``"400/10"``. Operators are applied strictly left to
right without precedence, so ``"1+2/4"`` evaluates as ``(1+2)/4``.
Arithmetic is exact (``fractions.Fraction``) and the result is rendered as a
decimal string with at least ``min_scale`` places.
"""

import re
from decimal import Context, Decimal
from fractions import Fraction

from kmyjournal.domain.errors import MalformedExpressionError, malformed_expression

DEFAULT_MIN_SCALE = 2
DEFAULT_MAX_SCALE = 8

_EXPRESSION = re.compile(r"[+-]?\d+(?:[+/-]\d+)*")
_TOKEN = re.compile(r"\d+|[+/-]")


def parse_fraction(expression: str) -> Fraction:
    """Evaluate a fraction expression into an exact rational value.

    Args:
        expression: Expression matching ``[+-]?N(('+'|'-'|'/')N)*``

    Returns:
        Exact value of the expression

    Raises:
        MalformedExpressionError: If the expression does not match the grammar
            or divides by zero
    """
    if expression is None or not _EXPRESSION.fullmatch(expression):
        raise MalformedExpressionError(malformed_expression(expression), expression)

    tokens = _TOKEN.findall(expression)
    # A leading sign applies to an implicit zero: "-5/2" is (0 - 5) / 2.
    if tokens[0] in "+-":
        tokens.insert(0, "0")

    result = Fraction(int(tokens[0]))
    for operator, operand in zip(tokens[1::2], tokens[2::2]):
        value = Fraction(int(operand))
        if operator == "+":
            result += value
        elif operator == "-":
            result -= value
        else:
            if value == 0:
                raise MalformedExpressionError(
                    malformed_expression(expression, "division by zero"), expression
                )
            result /= value
    return result


def _terminating_places(denominator: int) -> int | None:
    """Return decimal places needed to represent 1/denominator exactly."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


def to_decimal(
    value: Fraction,
    min_scale: int = DEFAULT_MIN_SCALE,
    max_scale: int = DEFAULT_MAX_SCALE,
) -> Decimal:
    """Collapse an exact fraction into a Decimal.

    Terminating values keep every significant place (never fewer than
    ``min_scale``); non-terminating ones are rounded half-even to
    ``max_scale`` places.
    """
    places = _terminating_places(value.denominator)
    if places is None or places > max_scale:
        scale = max_scale
        digits = round(value * 10**scale)
    else:
        scale = max(places, min_scale)
        digits = int(value * 10**scale)
    # Precision covers every digit, so scaleb is exact.
    exact = Context(prec=len(str(abs(digits))) + 1)
    return Decimal(digits).scaleb(-scale, context=exact)


def evaluate_fraction(
    expression: str,
    min_scale: int = DEFAULT_MIN_SCALE,
    max_scale: int = DEFAULT_MAX_SCALE,
) -> str:
    """Evaluate a fraction expression into a canonical decimal string.

    Examples:
        >>> evaluate_fraction("400/10")
        '40.00'
        >>> evaluate_fraction("1+2/4")
        '0.75'
    """
    return format(to_decimal(parse_fraction(expression), min_scale, max_scale), "f")
