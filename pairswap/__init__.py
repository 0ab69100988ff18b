"""Exact two-token pair pricing on constant-product and stable-swap curves."""

from pairswap.address import PairAddressCache, compute_pair_address
from pairswap.amm import CurveKind
from pairswap.config import DEFAULT_PAIR_CONFIG, PairConfig
from pairswap.errors import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvariantViolation,
    PairError,
)
from pairswap.models import Price, Token, TokenAmount
from pairswap.pair import Pair

__version__ = "0.1.0"
__all__ = [
    "Pair",
    "CurveKind",
    "Token",
    "TokenAmount",
    "Price",
    "PairConfig",
    "DEFAULT_PAIR_CONFIG",
    "PairAddressCache",
    "compute_pair_address",
    "PairError",
    "InsufficientReservesError",
    "InsufficientInputAmountError",
    "InvariantViolation",
    "__version__",
]
