"""Protocol constants for pair pricing.

Centralizes well-known addresses and protocol parameters.
"""

from pairswap.models.types import is_valid_address

# Liquidity permanently locked on the first mint
MINIMUM_LIQUIDITY = 1000

# Newton iteration budget for the stable-swap solver (matches the on-chain loop)
MAX_NEWTON_ITERATIONS = 255

# Fee factors: input is multiplied by NUMERATOR / DENOMINATOR before pricing
FEE_DENOMINATOR = 1000
CONSTANT_PRODUCT_FEE_NUMERATOR = 997  # 0.3%
STABLE_FEE_NUMERATOR = 996  # 0.4%

# Protocol fee takes 1/6 of fee growth: supply * (rootK - rootKLast) / (5 * rootK + rootKLast)
PROTOCOL_FEE_DIVISOR = 5

LIQUIDITY_TOKEN_DECIMALS = 18


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# UniswapV2 factory and pair init code hash (mainnet). Forks override these via PairConfig.
FACTORY_ADDRESS = _validate_address("factory", "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f")
INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"
