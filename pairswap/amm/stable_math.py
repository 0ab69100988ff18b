"""Stable-swap invariant math.

The curve is x^3*y + x*y^3 = k, i.e. xy(x^2 + y^2) = k, evaluated in 18-decimal
fixed point. Every "// SCALE" truncates on its own; the grouping below is the
on-chain grouping and must not be reassociated, since that changes rounding.

The output reserve for a trade is found with a bounded Newton iteration. The
loop gives up quietly after MAX_NEWTON_ITERATIONS and returns its last estimate.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pairswap.constants import MAX_NEWTON_ITERATIONS
from pairswap.math.fixed_point import SCALE
from pairswap.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class StableSolveResult:
    """Outcome of the Newton solve for the output reserve.

    Attributes:
        y: Final estimate of the output reserve (18-decimal fixed point)
        iterations: Newton steps taken
        converged: False if the iteration budget ran out first
    """

    y: int
    iterations: int
    converged: bool


def calculate_invariant(x: int, y: int, precision_x: int, precision_y: int) -> int:
    """Stable-swap constant k for raw reserves x and y.

    Args:
        x: Reserve of the first token in native units
        y: Reserve of the second token in native units
        precision_x: 10^decimals of the first token
        precision_y: 10^decimals of the second token

    Returns:
        k = (_x*_y/S) * (_x^2/S + _y^2/S) / S with _x, _y normalized to 18 decimals
    """
    _x = x * SCALE // precision_x
    _y = y * SCALE // precision_y
    _a = (_x * _y) // SCALE
    _b = (_x * _x) // SCALE + (_y * _y) // SCALE
    return _a * _b // SCALE  # x3y+y3x >= k


def invariant_f(x0: int, y: int) -> int:
    """Invariant value x0*y^3 + x0^3*y with x0 held fixed."""
    return (
        x0 * (y * y // SCALE * y // SCALE) // SCALE
        + (x0 * x0 // SCALE * x0 // SCALE) * y // SCALE
    )


def invariant_d(x0: int, y: int) -> int:
    """Derivative of invariant_f with respect to y: 3*x0*y^2 + x0^3."""
    return 3 * x0 * (y * y // SCALE) // SCALE + (x0 * x0 // SCALE * x0 // SCALE)


def solve_y(
    x0: int,
    xy: int,
    y: int,
    max_iterations: int = MAX_NEWTON_ITERATIONS,
) -> StableSolveResult:
    """Find y such that invariant_f(x0, y) == xy by Newton iteration.

    Algorithm:
        1. k = f(x0, y)
        2. y += (xy - k) * S / d(x0, y) if k < xy, else y -= (k - xy) * S / d(x0, y)
        3. Stop as soon as |y - y_prev| <= 1
        4. After max_iterations, return the last y anyway

    Args:
        x0: New input reserve (old reserve plus fee-adjusted input), 18 decimals
        xy: Invariant to preserve
        y: Starting guess, normally the current output reserve
        max_iterations: Step budget

    Returns:
        StableSolveResult with the estimate and convergence info

    Raises:
        DivisionByZero: If the derivative vanishes (both x0 and y effectively zero)
        Underflow: If a downward step would take y below zero
    """
    sxy = S(xy)
    sy = S(y)

    for i in range(max_iterations):
        y_prev = sy
        k = S(invariant_f(x0, sy.value))
        derivative = S(invariant_d(x0, sy.value))
        if k < sxy:
            dy = ((sxy - k) * SCALE) // derivative
            sy = sy + dy
        else:
            dy = ((k - sxy) * SCALE) // derivative
            sy = sy - dy

        if sy.abs_diff(y_prev) <= 1:
            return StableSolveResult(y=sy.value, iterations=i + 1, converged=True)

    logger.warning(
        "stable_get_y_not_converged",
        x0=x0,
        xy=sxy.value,
        y=sy.value,
        iterations=max_iterations,
    )
    return StableSolveResult(y=sy.value, iterations=max_iterations, converged=False)


def get_y(x0: int, xy: int, y: int, max_iterations: int = MAX_NEWTON_ITERATIONS) -> int:
    """Output reserve preserving the invariant; see solve_y."""
    return solve_y(x0, xy, y, max_iterations).y


__all__ = [
    "StableSolveResult",
    "calculate_invariant",
    "invariant_f",
    "invariant_d",
    "solve_y",
    "get_y",
]
