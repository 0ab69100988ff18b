"""Token identity.

A token is identified by (chain_id, address). Symbol and name are metadata
and never take part in equality or ordering.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pairswap.errors import invariant
from pairswap.models.types import Address, checksum_address


class Token(BaseModel):
    """An ERC20 token with a unique address and some metadata."""

    model_config = ConfigDict(frozen=True)

    chain_id: int = Field(ge=1)
    address: Address
    # Some exotic tokens use more than 18 decimals; 77 is the uint256 ceiling
    decimals: int = Field(ge=0, le=77)
    symbol: str | None = None
    name: str | None = None

    @field_validator("address", mode="before")
    @classmethod
    def _checksum(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"Address must be a string, got {type(value).__name__}")
        return checksum_address(value)

    def equals(self, other: Token) -> bool:
        """True if both tokens share chain_id and address."""
        if self is other:
            return True
        return self.chain_id == other.chain_id and self.address == other.address

    def sorts_before(self, other: Token) -> bool:
        """True if this token's address sorts before the other's.

        Raises:
            InvariantViolation: If the tokens are on different chains or share an address
        """
        invariant(self.chain_id == other.chain_id, "CHAIN_IDS")
        invariant(self.address != other.address, "ADDRESSES")
        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __repr__(self) -> str:
        label = self.symbol or self.address
        return f"Token({label}, chain_id={self.chain_id}, decimals={self.decimals})"


def sort_tokens(token_a: Token, token_b: Token) -> tuple[Token, Token]:
    """Return the two tokens in canonical (token0, token1) order."""
    return (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)
