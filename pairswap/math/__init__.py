"""Mathematical utilities for pair pricing.

This package provides the integer fixed-point primitives used by the curves:
- SCALE: 10^18 fixed-point unit
- isqrt, mul_div and decimal normalization helpers
"""

from pairswap.math.fixed_point import SCALE, div, from_scale, isqrt, mul, mul_div, to_scale

__all__ = ["SCALE", "div", "from_scale", "isqrt", "mul", "mul_div", "to_scale"]
