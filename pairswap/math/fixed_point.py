"""18-decimal fixed-point helpers over arbitrary-precision integers.

Every stable-swap intermediate is an int scaled by SCALE = 10^18. Division
truncates toward zero, matching EVM uint256 semantics. Nothing here touches
floating point: 1e18 is a float in Python and must never appear in pool math.
"""

from __future__ import annotations

import math

__all__ = [
    "SCALE",
    "mul",
    "div",
    "mul_div",
    "isqrt",
    "precision_of",
    "to_scale",
    "from_scale",
]

SCALE = 10**18


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's // floors toward negative infinity. For same-sign operands the two
    agree; for mixed signs the result is truncated explicitly.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in fixed-point div")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def mul(a: int, b: int) -> int:
    """Exact product of two integers."""
    return a * b


def div(a: int, b: int) -> int:
    """Truncating integer division (a / b rounded toward zero)."""
    return _div_trunc(a, b)


def mul_div(a: int, b: int, c: int) -> int:
    """Compute a * b / c with a single truncation at the end."""
    return _div_trunc(a * b, c)


def isqrt(n: int) -> int:
    """Largest integer whose square does not exceed n.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"isqrt of negative number: {n}")
    return math.isqrt(n)


def precision_of(decimals: int) -> int:
    """Return 10^decimals, the token's unit multiplier."""
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return 10**decimals


def to_scale(amount: int, precision: int) -> int:
    """Normalize a native-unit amount to 18-decimal fixed point (rounds down)."""
    return div(amount * SCALE, precision)


def from_scale(value: int, precision: int) -> int:
    """Convert an 18-decimal fixed-point value back to native units (rounds down)."""
    return div(value * precision, SCALE)
