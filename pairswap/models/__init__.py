"""Value types shared across the package."""

from pairswap.models.amount import TokenAmount
from pairswap.models.price import Price
from pairswap.models.token import Token, sort_tokens
from pairswap.models.types import (
    UINT256_MAX,
    Address,
    BigintIsh,
    checksum_address,
    is_valid_address,
    normalize_address,
    parse_bigint_ish,
)

__all__ = [
    "Token",
    "TokenAmount",
    "Price",
    "sort_tokens",
    "Address",
    "BigintIsh",
    "UINT256_MAX",
    "checksum_address",
    "is_valid_address",
    "normalize_address",
    "parse_bigint_ish",
]
