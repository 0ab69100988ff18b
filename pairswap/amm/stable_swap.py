"""Stable-swap pricing for two-token pairs.

Exact-input quotes run on the xy(x^2 + y^2) = k curve: reserves and the
fee-adjusted input are normalized to 18 decimals, the new output reserve is
solved for, and the difference is scaled back to the output token's decimals.

Exact-output quotes use the constant-product formula. Pairs built on this
curve have always priced that direction on x * y = k; the two directions are
therefore not inverses of each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from pairswap.amm.constant_product import ConstantProductPricer
from pairswap.amm.stable_math import calculate_invariant, solve_y
from pairswap.constants import FEE_DENOMINATOR, MAX_NEWTON_ITERATIONS, STABLE_FEE_NUMERATOR
from pairswap.errors import InsufficientInputAmountError, InsufficientReservesError
from pairswap.math.fixed_point import from_scale, precision_of, to_scale
from pairswap.safe_int import SafeIntError

logger = structlog.get_logger()


@dataclass(frozen=True)
class StableSwapPricer:
    """Stable-swap pricer with a constant-product exact-output path.

    Attributes:
        fee_numerator: Share of the input that is priced (996 for 0.4% fee)
        fee_denominator: Denominator for fee_numerator
        max_iterations: Newton iteration budget
        exact_output_pricer: Pricer used by compute_input
    """

    fee_numerator: int = STABLE_FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR
    max_iterations: int = MAX_NEWTON_ITERATIONS
    exact_output_pricer: ConstantProductPricer = field(default_factory=ConstantProductPricer)

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        """Calculate output for an exact input on the stable curve.

        Args:
            amount_in: Input amount in native units (before fee)
            reserve_in: Input reserve in native units
            reserve_out: Output reserve in native units
            decimals_in: Decimals of the input token
            decimals_out: Decimals of the output token

        Returns:
            Output amount in the output token's native units, rounded down

        Raises:
            InsufficientReservesError: If a reserve is zero or too small to solve on the curve
            InsufficientInputAmountError: If the output rounds to zero
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientReservesError("Stable pricing needs non-zero reserves")

        precision_in = precision_of(decimals_in)
        precision_out = precision_of(decimals_out)
        amount_in_with_fee = amount_in * self.fee_numerator // self.fee_denominator

        xy = calculate_invariant(reserve_in, reserve_out, precision_in, precision_out)
        reserve_in_adj = to_scale(reserve_in, precision_in)
        reserve_out_adj = to_scale(reserve_out, precision_out)
        amount_in_adj = to_scale(amount_in_with_fee, precision_in)
        if amount_in_adj == 0:
            raise InsufficientInputAmountError(f"Input {amount_in} is lost to fee and rounding")

        try:
            result = solve_y(
                amount_in_adj + reserve_in_adj, xy, reserve_out_adj, self.max_iterations
            )
        except SafeIntError as err:
            raise InsufficientReservesError(
                "Reserves too small to price on the stable curve"
            ) from err

        if result.y >= reserve_out_adj:
            raise InsufficientInputAmountError(f"Input {amount_in} yields no output")

        amount_out = from_scale(reserve_out_adj - result.y, precision_out)
        logger.debug(
            "stable_swap_quote",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            iterations=result.iterations,
            converged=result.converged,
        )
        if amount_out == 0:
            raise InsufficientInputAmountError(f"Input {amount_in} yields no output")
        return amount_out

    def compute_output(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        return self.get_amount_out(amount_in, reserve_in, reserve_out, decimals_in, decimals_out)

    def compute_input(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        return self.exact_output_pricer.compute_input(
            amount_out, reserve_in, reserve_out, decimals_in, decimals_out
        )
