"""Exact rational prices between two tokens.

Prices are for display and quoting; the swap math never goes through them.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from pairswap.errors import invariant
from pairswap.models.amount import TokenAmount
from pairswap.models.token import Token


@dataclass(frozen=True)
class Price:
    """Raw quote-token units per raw base-token unit.

    Attributes:
        base_token: Token being priced
        quote_token: Token the price is expressed in
        denominator: Raw amount of base_token
        numerator: Raw amount of quote_token
    """

    base_token: Token
    quote_token: Token
    denominator: int
    numerator: int

    def __post_init__(self) -> None:
        invariant(self.denominator != 0, "DENOMINATOR")

    @property
    def raw(self) -> Fraction:
        """Exact ratio of raw units."""
        return Fraction(self.numerator, self.denominator)

    @property
    def adjusted(self) -> Fraction:
        """Ratio in whole-token units (decimals applied)."""
        scalar = Fraction(10**self.base_token.decimals, 10**self.quote_token.decimals)
        return self.raw * scalar

    def invert(self) -> Price:
        return Price(self.quote_token, self.base_token, self.numerator, self.denominator)

    def multiply(self, other: Price) -> Price:
        """Chain prices: (A in B) * (B in C) = (A in C)."""
        invariant(self.quote_token.equals(other.base_token), "TOKEN")
        return Price(
            self.base_token,
            other.quote_token,
            self.denominator * other.denominator,
            self.numerator * other.numerator,
        )

    def quote(self, amount: TokenAmount) -> TokenAmount:
        """Convert an amount of base_token into quote_token, rounding down."""
        invariant(amount.token.equals(self.base_token), "TOKEN")
        return TokenAmount(self.quote_token, amount.raw * self.numerator // self.denominator)
