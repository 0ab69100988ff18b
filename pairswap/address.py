"""Deterministic pair addresses.

A pair's liquidity token lives at the CREATE2 address the factory deploys it
to:

    salt    = keccak256(abi.encodePacked(token0, token1))
    address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]

PairAddressCache memoizes results. It is an ordinary object owned by the
caller; nothing in this module keeps state between calls.
"""

from __future__ import annotations

from collections import OrderedDict

import structlog
from eth_abi.packed import encode_packed
from eth_utils import keccak, to_checksum_address

from pairswap.constants import FACTORY_ADDRESS, INIT_CODE_HASH
from pairswap.models.token import Token, sort_tokens
from pairswap.models.types import checksum_address, normalize_address

logger = structlog.get_logger()

_CREATE2_PREFIX = b"\xff"


def compute_pair_address(
    token_a: Token,
    token_b: Token,
    factory_address: str = FACTORY_ADDRESS,
    init_code_hash: str = INIT_CODE_HASH,
) -> str:
    """Derive the checksummed CREATE2 address of the pair for two tokens.

    Token order does not matter; tokens are sorted first.

    Args:
        token_a: One token of the pair
        token_b: The other token
        factory_address: Factory that deploys pairs
        init_code_hash: keccak256 of the pair creation code, 0x-prefixed

    Returns:
        Checksummed pair address

    Raises:
        InvariantViolation: If the tokens are on different chains or identical
        ValueError: If factory_address or init_code_hash is malformed
    """
    token0, token1 = sort_tokens(token_a, token_b)
    salt = keccak(encode_packed(["address", "address"], [token0.address, token1.address]))
    factory_bytes = bytes.fromhex(checksum_address(factory_address)[2:])
    init_code_bytes = bytes.fromhex(init_code_hash[2:])
    if len(init_code_bytes) != 32:
        raise ValueError(f"Init code hash must be 32 bytes: {init_code_hash}")

    digest = keccak(_CREATE2_PREFIX + factory_bytes + salt + init_code_bytes)
    return to_checksum_address(digest[12:])


class PairAddressCache:
    """Caller-owned memo of pair addresses.

    Keyed by (factory, init code hash, token0, token1). When max_size is set,
    the oldest entry is evicted once the cache is full.
    """

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._max_size = max_size
        self._entries: OrderedDict[tuple[str, str, str, str], str] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def get_or_compute(
        self,
        token_a: Token,
        token_b: Token,
        factory_address: str = FACTORY_ADDRESS,
        init_code_hash: str = INIT_CODE_HASH,
    ) -> str:
        """Return the cached pair address, computing and storing it on a miss."""
        token0, token1 = sort_tokens(token_a, token_b)
        key = (
            normalize_address(factory_address),
            normalize_address(init_code_hash),
            normalize_address(token0.address),
            normalize_address(token1.address),
        )
        cached = self._entries.get(key)
        if cached is not None:
            return cached

        address = compute_pair_address(token0, token1, factory_address, init_code_hash)
        if self._max_size is not None and len(self._entries) >= self._max_size:
            evicted_key, _ = self._entries.popitem(last=False)
            logger.debug("pair_address_evicted", token0=evicted_key[2], token1=evicted_key[3])
        self._entries[key] = address
        return address


__all__ = ["PairAddressCache", "compute_pair_address"]
