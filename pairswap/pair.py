"""Two-token pair: swap quotes and liquidity accounting.

A Pair is an immutable snapshot of two reserves held in canonical token order.
Quoting a trade returns the counterparty amount together with a new Pair
holding the post-trade reserves; the original snapshot is never modified.

The curve (constant-product or stable-swap) is chosen when the pair is built.
"""

from __future__ import annotations

import copy

import structlog

from pairswap.address import PairAddressCache, compute_pair_address
from pairswap.amm import CurveKind, CurvePricer, get_pricer
from pairswap.config import DEFAULT_PAIR_CONFIG, PairConfig
from pairswap.constants import PROTOCOL_FEE_DIVISOR
from pairswap.errors import InsufficientInputAmountError, InsufficientReservesError, invariant
from pairswap.math.fixed_point import isqrt
from pairswap.models.amount import TokenAmount
from pairswap.models.price import Price
from pairswap.models.token import Token
from pairswap.models.types import BigintIsh, parse_bigint_ish

logger = structlog.get_logger()


class Pair:
    """Liquidity pair of two tokens priced on one curve.

    Attributes:
        liquidity_token: The pair's LP token (18 decimals, at the pair address)
        curve: Pricing curve chosen at construction
        config: Fee, liquidity and factory parameters
    """

    __slots__ = (
        "liquidity_token",
        "curve",
        "config",
        "_pricer",
        "_token_amounts",
        "_address_cache",
    )

    def __init__(
        self,
        token_amount_a: TokenAmount,
        token_amount_b: TokenAmount,
        curve: CurveKind = CurveKind.STABLE_SWAP,
        config: PairConfig = DEFAULT_PAIR_CONFIG,
        address_cache: PairAddressCache | None = None,
    ) -> None:
        """Create a pair snapshot from two reserve amounts, in any order.

        Args:
            token_amount_a: Reserve of one token
            token_amount_b: Reserve of the other token
            curve: Pricing curve for this pair
            config: Pricing configuration
            address_cache: Optional memo for the pair address derivation

        Raises:
            InvariantViolation: If the tokens are identical or on different chains
        """
        if token_amount_a.token.sorts_before(token_amount_b.token):
            self._token_amounts = (token_amount_a, token_amount_b)
        else:
            self._token_amounts = (token_amount_b, token_amount_a)

        self.curve = CurveKind(curve)
        self.config = config
        self._pricer: CurvePricer = get_pricer(self.curve, config)
        self._address_cache = address_cache
        self.liquidity_token = Token(
            chain_id=self.token0.chain_id,
            address=Pair.get_address(self.token0, self.token1, config, address_cache),
            decimals=config.liquidity_token_decimals,
            symbol=config.liquidity_token_symbol,
            name=config.liquidity_token_name,
        )

    @staticmethod
    def get_address(
        token_a: Token,
        token_b: Token,
        config: PairConfig = DEFAULT_PAIR_CONFIG,
        address_cache: PairAddressCache | None = None,
    ) -> str:
        """Address of the pair for two tokens under the configured factory."""
        if address_cache is not None:
            return address_cache.get_or_compute(
                token_a, token_b, config.factory_address, config.init_code_hash
            )
        return compute_pair_address(token_a, token_b, config.factory_address, config.init_code_hash)

    def _with_reserves(self, amount_a: TokenAmount, amount_b: TokenAmount) -> Pair:
        """Snapshot with new reserves; curve, pricer and liquidity token are shared."""
        pair = copy.copy(self)
        if amount_a.token.equals(self.token0):
            pair._token_amounts = (amount_a, amount_b)
        else:
            pair._token_amounts = (amount_b, amount_a)
        return pair

    def __repr__(self) -> str:
        return (
            f"Pair({self.reserve0.raw} {self.token0.symbol or self.token0.address}, "
            f"{self.reserve1.raw} {self.token1.symbol or self.token1.address}, "
            f"curve={self.curve.value})"
        )

    # --- Accessors ---

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def token0(self) -> Token:
        return self._token_amounts[0].token

    @property
    def token1(self) -> Token:
        return self._token_amounts[1].token

    @property
    def reserve0(self) -> TokenAmount:
        return self._token_amounts[0]

    @property
    def reserve1(self) -> TokenAmount:
        return self._token_amounts[1]

    def involves_token(self, token: Token) -> bool:
        """True if the token is either token0 or token1."""
        return token.equals(self.token0) or token.equals(self.token1)

    def reserve_of(self, token: Token) -> TokenAmount:
        invariant(self.involves_token(token), "TOKEN")
        return self.reserve0 if token.equals(self.token0) else self.reserve1

    def other_token(self, token: Token) -> Token:
        invariant(self.involves_token(token), "TOKEN")
        return self.token1 if token.equals(self.token0) else self.token0

    @property
    def token0_price(self) -> Price:
        """Mid price of token0 in terms of token1 (reserve1 / reserve0)."""
        return Price(self.token0, self.token1, self.reserve0.raw, self.reserve1.raw)

    @property
    def token1_price(self) -> Price:
        """Mid price of token1 in terms of token0 (reserve0 / reserve1)."""
        return Price(self.token1, self.token0, self.reserve1.raw, self.reserve0.raw)

    def price_of(self, token: Token) -> Price:
        invariant(self.involves_token(token), "TOKEN")
        return self.token0_price if token.equals(self.token0) else self.token1_price

    # --- Swaps ---

    def get_output_amount(self, input_amount: TokenAmount) -> tuple[TokenAmount, Pair]:
        """Quote an exact-input swap.

        Args:
            input_amount: Amount of token0 or token1 to sell

        Returns:
            Tuple of (output amount of the other token, pair after the swap)

        Raises:
            InvariantViolation: If the input token is not in the pair
            InsufficientReservesError: If either reserve is zero
            InsufficientInputAmountError: If the output rounds to zero
        """
        invariant(self.involves_token(input_amount.token), "TOKEN")
        if self.reserve0.is_zero or self.reserve1.is_zero:
            raise InsufficientReservesError("Pair has an empty reserve")

        input_reserve = self.reserve_of(input_amount.token)
        output_token = self.other_token(input_amount.token)
        output_reserve = self.reserve_of(output_token)

        amount_out = self._pricer.compute_output(
            input_amount.raw,
            input_reserve.raw,
            output_reserve.raw,
            input_amount.token.decimals,
            output_token.decimals,
        )
        output_amount = TokenAmount(output_token, amount_out)
        if output_amount.is_zero:
            raise InsufficientInputAmountError(f"Input {input_amount.raw} yields no output")

        return output_amount, self._with_reserves(
            input_reserve.add(input_amount), output_reserve.subtract(output_amount)
        )

    def get_input_amount(self, output_amount: TokenAmount) -> tuple[TokenAmount, Pair]:
        """Quote an exact-output swap.

        Stable-swap pairs price this direction on the constant-product formula.

        Args:
            output_amount: Amount of token0 or token1 to buy

        Returns:
            Tuple of (required input amount of the other token, pair after the swap)

        Raises:
            InvariantViolation: If the output token is not in the pair
            InsufficientReservesError: If a reserve is zero or output >= its reserve
        """
        invariant(self.involves_token(output_amount.token), "TOKEN")
        if (
            self.reserve0.is_zero
            or self.reserve1.is_zero
            or output_amount.raw >= self.reserve_of(output_amount.token).raw
        ):
            raise InsufficientReservesError(
                f"Cannot take {output_amount.raw} from pair reserves"
            )

        output_reserve = self.reserve_of(output_amount.token)
        input_token = self.other_token(output_amount.token)
        input_reserve = self.reserve_of(input_token)

        amount_in = self._pricer.compute_input(
            output_amount.raw,
            input_reserve.raw,
            output_reserve.raw,
            input_token.decimals,
            output_amount.token.decimals,
        )
        input_amount = TokenAmount(input_token, amount_in)
        return input_amount, self._with_reserves(
            input_reserve.add(input_amount), output_reserve.subtract(output_amount)
        )

    # --- Liquidity ---

    def get_liquidity_minted(
        self,
        total_supply: TokenAmount,
        token_amount_a: TokenAmount,
        token_amount_b: TokenAmount,
    ) -> TokenAmount:
        """Liquidity tokens minted for a deposit.

        First deposit: sqrt(amount0 * amount1) - MINIMUM_LIQUIDITY.
        Later deposits: min(amount0 * supply / reserve0, amount1 * supply / reserve1).

        Raises:
            InvariantViolation: If total_supply is not this pair's liquidity token,
                or the deposit tokens are not token0 and token1
            InsufficientInputAmountError: If the minted liquidity is not positive
        """
        invariant(total_supply.token.equals(self.liquidity_token), "LIQUIDITY")
        if token_amount_a.token.sorts_before(token_amount_b.token):
            amount0, amount1 = token_amount_a, token_amount_b
        else:
            amount0, amount1 = token_amount_b, token_amount_a
        invariant(
            amount0.token.equals(self.token0) and amount1.token.equals(self.token1), "TOKEN"
        )

        if total_supply.is_zero:
            liquidity = isqrt(amount0.raw * amount1.raw) - self.config.minimum_liquidity
        else:
            if self.reserve0.is_zero or self.reserve1.is_zero:
                raise InsufficientReservesError("Pair has an empty reserve")
            liquidity0 = amount0.raw * total_supply.raw // self.reserve0.raw
            liquidity1 = amount1.raw * total_supply.raw // self.reserve1.raw
            liquidity = min(liquidity0, liquidity1)

        if liquidity <= 0:
            raise InsufficientInputAmountError(f"Deposit mints no liquidity ({liquidity})")

        logger.debug(
            "liquidity_minted",
            total_supply=total_supply.raw,
            amount0=amount0.raw,
            amount1=amount1.raw,
            liquidity=liquidity,
        )
        return TokenAmount(self.liquidity_token, liquidity)

    def get_liquidity_value(
        self,
        token: Token,
        total_supply: TokenAmount,
        liquidity: TokenAmount,
        fee_on: bool = False,
        k_last: BigintIsh | None = None,
    ) -> TokenAmount:
        """Amount of one underlying token redeemable for a liquidity position.

        With the protocol fee on, the supply is first diluted by the liquidity
        the protocol would mint for fee growth since k_last:
        supply * (rootK - rootKLast) / (5 * rootK + rootKLast).

        Args:
            token: Underlying token to value the position in
            total_supply: Current liquidity token supply
            liquidity: Liquidity position being valued
            fee_on: Whether the protocol fee is switched on
            k_last: reserve0 * reserve1 as of the last liquidity event (required if fee_on)

        Raises:
            InvariantViolation: On foreign tokens, liquidity > supply, or missing k_last
        """
        invariant(self.involves_token(token), "TOKEN")
        invariant(total_supply.token.equals(self.liquidity_token), "TOTAL_SUPPLY")
        invariant(liquidity.token.equals(self.liquidity_token), "LIQUIDITY")
        invariant(liquidity.raw <= total_supply.raw, "LIQUIDITY")

        total_supply_adjusted = total_supply
        if fee_on:
            invariant(k_last is not None, "K_LAST")
            k_last_parsed = parse_bigint_ish(k_last)
            if k_last_parsed != 0:
                root_k = isqrt(self.reserve0.raw * self.reserve1.raw)
                root_k_last = isqrt(k_last_parsed)
                if root_k > root_k_last:
                    numerator = total_supply.raw * (root_k - root_k_last)
                    denominator = root_k * PROTOCOL_FEE_DIVISOR + root_k_last
                    fee_liquidity = numerator // denominator
                    total_supply_adjusted = total_supply.add(
                        TokenAmount(self.liquidity_token, fee_liquidity)
                    )

        invariant(not total_supply_adjusted.is_zero, "TOTAL_SUPPLY")
        return TokenAmount(
            token, liquidity.raw * self.reserve_of(token).raw // total_supply_adjusted.raw
        )


__all__ = ["Pair"]
