"""Operand parsing, operator dispatch and number formatting.

Pure functions with no I/O: the session module feeds them raw input lines
and prints what they return.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable

from simplecalc.models import ErrorKind, Operator, Outcome, ParseError


def parse_operand(text: str) -> float:
    """Parse one line of input as a real number.

    Surrounding whitespace is ignored. Accepts what ``float()`` accepts
    (including ``inf`` and ``nan``) except digit-group underscores and
    non-ASCII digits.

    Args:
        text: Raw input line.

    Returns:
        The parsed value.

    Raises:
        ParseError: If the text is not a valid real number.
    """
    stripped = text.strip()
    if not stripped or not stripped.isascii() or "_" in stripped:
        raise ParseError(text)
    try:
        return float(stripped)
    except ValueError:
        raise ParseError(text) from None


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> Outcome:
    """Divide a by b, failing on a zero divisor (either sign)."""
    if b == 0:
        return Outcome.failure(ErrorKind.DIVISION_BY_ZERO)
    return Outcome.success(a / b)


# Operators that cannot fail. Division is handled separately.
_TOTAL_OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
}


def calculate(a: float, token: str, b: float) -> Outcome:
    """Apply the operator named by ``token`` to a and b.

    Args:
        a: Left operand.
        token: Operator symbol as typed (already trimmed).
        b: Right operand.

    Returns:
        Outcome with the value, or with INVALID_OPERATOR for any token
        outside ``+ - * /`` and DIVISION_BY_ZERO for ``/`` with b == 0.
    """
    try:
        op = Operator(token)
    except ValueError:
        return Outcome.failure(ErrorKind.INVALID_OPERATOR)
    if op is Operator.DIVIDE:
        return divide(a, b)
    return Outcome.success(_TOTAL_OPERATIONS[op](a, b))


def format_number(value: float) -> str:
    """Render a float in plain positional notation.

    Uses the shortest round-tripping digits, never an exponent, and drops a
    fractional part of zero: 7.0 → '7', 1e-7 → '0.0000001', -0.0 → '-0'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
