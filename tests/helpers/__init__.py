"""Test helpers module for shared test utilities.

- constants: Tokens, addresses and common amounts
- factories: Pair factory functions
"""

from tests.helpers.constants import (
    DAI,
    DAI_WETH_PAIR,
    ONE,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    USDC,
    USDC_WETH_PAIR,
    WETH,
)
from tests.helpers.factories import make_pair

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "ONE",
    "USDC_WETH_PAIR",
    "DAI_WETH_PAIR",
    # Factories
    "make_pair",
]
