"""Curve selection and the common pricer interface."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class CurveKind(str, Enum):
    """Pricing curve a pair is created with."""

    CONSTANT_PRODUCT = "constantProduct"
    STABLE_SWAP = "stableSwap"


@runtime_checkable
class CurvePricer(Protocol):
    """Protocol for pair pricing curves.

    Both methods take raw reserves in native token units plus each side's
    decimals, so curves that normalize (stable-swap) and curves that do not
    (constant-product) share one call shape.
    """

    def compute_output(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        """Output amount for an exact input.

        Raises:
            InsufficientInputAmountError: If the output truncates to zero
        """
        ...

    def compute_input(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        decimals_in: int,
        decimals_out: int,
    ) -> int:
        """Input amount required for an exact output.

        Raises:
            InsufficientReservesError: If amount_out is not below reserve_out
        """
        ...
