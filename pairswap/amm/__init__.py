"""Pricing curves for two-token pairs."""

from pairswap.amm.base import CurveKind, CurvePricer
from pairswap.amm.constant_product import ConstantProductPricer
from pairswap.amm.stable_math import (
    StableSolveResult,
    calculate_invariant,
    get_y,
    invariant_d,
    invariant_f,
    solve_y,
)
from pairswap.amm.stable_swap import StableSwapPricer
from pairswap.config import DEFAULT_PAIR_CONFIG, PairConfig


def get_pricer(kind: CurveKind, config: PairConfig = DEFAULT_PAIR_CONFIG) -> CurvePricer:
    """Build the pricer for a curve from configuration.

    Raises:
        ValueError: If kind is not a known curve
    """
    constant_product = ConstantProductPricer(
        fee_numerator=config.constant_product_fee_numerator,
        fee_denominator=config.fee_denominator,
    )
    if kind is CurveKind.CONSTANT_PRODUCT:
        return constant_product
    if kind is CurveKind.STABLE_SWAP:
        return StableSwapPricer(
            fee_numerator=config.stable_fee_numerator,
            fee_denominator=config.fee_denominator,
            max_iterations=config.max_newton_iterations,
            exact_output_pricer=constant_product,
        )
    raise ValueError(f"Unknown curve kind: {kind!r}")


__all__ = [
    "CurveKind",
    "CurvePricer",
    "ConstantProductPricer",
    "StableSwapPricer",
    "StableSolveResult",
    "calculate_invariant",
    "invariant_f",
    "invariant_d",
    "solve_y",
    "get_y",
    "get_pricer",
]
