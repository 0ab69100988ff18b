"""Token amounts in the token's smallest unit."""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal

from pairswap.errors import invariant
from pairswap.models.token import Token
from pairswap.models.types import UINT256_MAX

# 78 digits of precision, enough for any uint256 amount
_DISPLAY_CONTEXT = decimal.Context(prec=78)


@dataclass(frozen=True)
class TokenAmount:
    """A non-negative raw amount of a specific token.

    Attributes:
        token: The token this amount is denominated in
        raw: Amount in the token's smallest unit (e.g. wei)
    """

    token: Token
    raw: int

    def __post_init__(self) -> None:
        invariant(isinstance(self.raw, int) and not isinstance(self.raw, bool), "AMOUNT")
        invariant(0 <= self.raw <= UINT256_MAX, "AMOUNT")

    @property
    def is_zero(self) -> bool:
        return self.raw == 0

    def add(self, other: TokenAmount) -> TokenAmount:
        """Sum of two amounts of the same token."""
        invariant(self.token.equals(other.token), "TOKEN")
        return TokenAmount(self.token, self.raw + other.raw)

    def subtract(self, other: TokenAmount) -> TokenAmount:
        """Difference of two amounts of the same token; must stay non-negative."""
        invariant(self.token.equals(other.token), "TOKEN")
        invariant(other.raw <= self.raw, "AMOUNT")
        return TokenAmount(self.token, self.raw - other.raw)

    def to_decimal(self) -> Decimal:
        """Amount in whole token units, for display only."""
        with decimal.localcontext(_DISPLAY_CONTEXT):
            return Decimal(self.raw).scaleb(-self.token.decimals)

    def __str__(self) -> str:
        return f"{self.to_decimal()} {self.token.symbol or self.token.address}"
