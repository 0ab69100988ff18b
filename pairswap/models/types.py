"""Shared type definitions and parsing helpers.

Addresses are compared case-insensitively and stored checksummed.
"""

from typing import Annotated, Any

from eth_utils import to_checksum_address
from pydantic import Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Integer-like inputs accepted wherever a raw amount is expected
BigintIsh = int | str


def normalize_address(address: str) -> str:
    """Normalize an Ethereum address or hash to lowercase with 0x prefix."""
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: Any) -> bool:
    """Check if a value is a 0x-prefixed 20-byte hex string."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def checksum_address(address: str) -> str:
    """Validate an address and return its EIP-55 checksummed form.

    Raises:
        ValueError: If the address is not 0x + 40 hex chars
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid address: {address}")
    return to_checksum_address(address)


def parse_bigint_ish(value: Any) -> int:
    """Parse an int, decimal string, or 0x-hex string into a uint256 int.

    Raises:
        ValueError: If value is not an integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not an integer amount")
    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value, 16) if value.lower().startswith("0x") else int(value)
        except ValueError as err:
            raise ValueError(f"Not an integer string: '{value}'") from err
    else:
        raise ValueError(f"Expected int or str, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return int_value
