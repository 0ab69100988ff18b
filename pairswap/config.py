"""Pair pricing configuration."""

from dataclasses import dataclass

from pairswap.constants import (
    CONSTANT_PRODUCT_FEE_NUMERATOR,
    FACTORY_ADDRESS,
    FEE_DENOMINATOR,
    INIT_CODE_HASH,
    LIQUIDITY_TOKEN_DECIMALS,
    MAX_NEWTON_ITERATIONS,
    MINIMUM_LIQUIDITY,
    STABLE_FEE_NUMERATOR,
)
from pairswap.models.types import is_valid_address


@dataclass(frozen=True)
class PairConfig:
    """Centralized configuration for pair pricing.

    Holds the fee factors, liquidity floor, solver budget and the factory
    parameters used to derive pair addresses, so tests and forks can swap
    them in one place.

    Attributes:
        constant_product_fee_numerator: Input multiplier for x*y=k pricing (997 = 0.3% fee)
        stable_fee_numerator: Input multiplier for stable-swap pricing (996 = 0.4% fee)
        fee_denominator: Common denominator for both fee numerators
        minimum_liquidity: Liquidity locked forever on the first mint
        max_newton_iterations: Iteration cap for the stable-swap solver
        factory_address: Factory deploying the pairs (CREATE2 deployer)
        init_code_hash: keccak256 of the pair creation code (0x + 64 hex chars)
        liquidity_token_symbol: Symbol given to pair liquidity tokens
        liquidity_token_name: Name given to pair liquidity tokens
    """

    constant_product_fee_numerator: int = CONSTANT_PRODUCT_FEE_NUMERATOR
    stable_fee_numerator: int = STABLE_FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR
    minimum_liquidity: int = MINIMUM_LIQUIDITY
    max_newton_iterations: int = MAX_NEWTON_ITERATIONS
    factory_address: str = FACTORY_ADDRESS
    init_code_hash: str = INIT_CODE_HASH
    liquidity_token_symbol: str = "UNI-V2"
    liquidity_token_name: str = "Uniswap V2"

    def __post_init__(self) -> None:
        if self.fee_denominator <= 0:
            raise ValueError(f"fee_denominator must be positive, got {self.fee_denominator}")
        for name in ("constant_product_fee_numerator", "stable_fee_numerator"):
            numerator = getattr(self, name)
            if not 0 < numerator <= self.fee_denominator:
                raise ValueError(
                    f"{name} must be in (0, {self.fee_denominator}], got {numerator}"
                )
        if self.minimum_liquidity < 0:
            raise ValueError(
                f"minimum_liquidity must be non-negative, got {self.minimum_liquidity}"
            )
        if self.max_newton_iterations <= 0:
            raise ValueError(
                f"max_newton_iterations must be positive, got {self.max_newton_iterations}"
            )
        if not is_valid_address(self.factory_address):
            raise ValueError(f"Invalid factory address: {self.factory_address}")
        if not (
            self.init_code_hash.startswith("0x")
            and len(self.init_code_hash) == 66
            and _is_hex(self.init_code_hash[2:])
        ):
            raise ValueError(f"Invalid init code hash: {self.init_code_hash}")

    @property
    def liquidity_token_decimals(self) -> int:
        return LIQUIDITY_TOKEN_DECIMALS


def _is_hex(value: str) -> bool:
    try:
        int(value, 16)
        return True
    except ValueError:
        return False


# Default configuration instance
DEFAULT_PAIR_CONFIG = PairConfig()
