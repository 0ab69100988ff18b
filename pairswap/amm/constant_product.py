"""Constant-product (x * y = k) pricing.

Formula: amount_out = (amount_in * fee * reserve_out) / (reserve_in * 1000 + amount_in * fee)

With the default fee numerator of 997 the input is charged 0.3%.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pairswap.constants import CONSTANT_PRODUCT_FEE_NUMERATOR, FEE_DENOMINATOR
from pairswap.errors import InsufficientInputAmountError, InsufficientReservesError
from pairswap.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class ConstantProductPricer:
    """Fee-adjusted x * y = k pricer.

    Attributes:
        fee_numerator: Share of the input that is priced (997 for 0.3% fee)
        fee_denominator: Denominator for fee_numerator
    """

    fee_numerator: int = CONSTANT_PRODUCT_FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR

    def get_amount_out(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate output amount using the constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount, rounded down

        Raises:
            InsufficientReservesError: If either reserve is zero
            InsufficientInputAmountError: If the output rounds to zero
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientReservesError("Constant product pricing needs non-zero reserves")

        amount_in_with_fee = S(amount_in) * self.fee_numerator
        numerator = amount_in_with_fee * reserve_out
        denominator = S(reserve_in) * self.fee_denominator + amount_in_with_fee
        amount_out = (numerator // denominator).value

        if amount_out == 0:
            raise InsufficientInputAmountError(f"Input {amount_in} yields no output")
        return amount_out

    def get_amount_in(self, amount_out: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate required input for a desired output.

        Formula: amount_in = (reserve_in * out * 1000) / ((reserve_out - out) * fee) + 1

        The +1 rounds against the trader, so the pool never loses value to truncation.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount

        Raises:
            InsufficientReservesError: If a reserve is zero or amount_out >= reserve_out
        """
        if reserve_in <= 0 or reserve_out <= 0 or amount_out >= reserve_out:
            raise InsufficientReservesError(
                f"Cannot take {amount_out} from reserve {reserve_out}"
            )

        numerator = S(reserve_in) * amount_out * self.fee_denominator
        denominator = (S(reserve_out) - amount_out) * self.fee_numerator
        return ((numerator // denominator) + 1).value

    def compute_output(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)
        logger.debug(
            "constant_product_quote",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )
        return amount_out

    def compute_input(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        amount_in = self.get_amount_in(amount_out, reserve_in, reserve_out)
        logger.debug(
            "constant_product_quote_exact_output",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )
        return amount_in
