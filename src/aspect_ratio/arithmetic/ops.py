"""Checked floating-point division and multiplication."""

import math

from aspect_ratio.exceptions import DivisionError, MultiplicationError


def checked_div(numerator: float, denominator: float) -> float:
    """Divide two numbers, failing instead of producing inf or NaN.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The finite quotient

    Raises:
        DivisionError: If the divisor is zero or the quotient is not finite
    """
    if denominator == 0:
        raise DivisionError(
            f"Division by zero: {numerator!r} / {denominator!r}", numerator, denominator
        )
    try:
        result = float(numerator) / float(denominator)
    except OverflowError as e:
        raise DivisionError(
            f"Division overflowed: {numerator!r} / {denominator!r}", numerator, denominator
        ) from e
    if not math.isfinite(result):
        raise DivisionError(
            f"Division is not finite: {numerator!r} / {denominator!r} = {result!r}",
            numerator,
            denominator,
        )
    return result


def checked_mul(lhs: float, rhs: float) -> float:
    """Multiply two numbers, failing instead of producing inf or NaN.

    Args:
        lhs: Left operand
        rhs: Right operand

    Returns:
        The finite product

    Raises:
        MultiplicationError: If the product overflows or is not finite
    """
    try:
        result = float(lhs) * float(rhs)
    except OverflowError as e:
        raise MultiplicationError(
            f"Multiplication overflowed: {lhs!r} * {rhs!r}", lhs, rhs
        ) from e
    if not math.isfinite(result):
        raise MultiplicationError(
            f"Multiplication is not finite: {lhs!r} * {rhs!r} = {result!r}", lhs, rhs
        )
    return result
