"""Tests for Pair construction, accessors and swap quotes."""

from fractions import Fraction

import pytest

from pairswap import DEFAULT_PAIR_CONFIG, PairConfig
from pairswap.address import compute_pair_address
from pairswap.amm import ConstantProductPricer, CurveKind, StableSwapPricer
from pairswap.errors import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvariantViolation,
)
from pairswap.models import Token, TokenAmount
from pairswap.pair import Pair
from tests.helpers import DAI, ONE, TOKEN_A, TOKEN_B, TOKEN_C, USDC, make_pair


class TestPairConstruction:
    """Tests for canonical ordering and the liquidity token."""

    def test_tokens_sorted(self):
        pair = make_pair(90 * ONE, 100 * ONE, token_a=TOKEN_B, token_b=TOKEN_A)
        assert pair.token0 == TOKEN_A
        assert pair.token1 == TOKEN_B
        assert pair.reserve0 == TokenAmount(TOKEN_A, 100 * ONE)
        assert pair.reserve1 == TokenAmount(TOKEN_B, 90 * ONE)

    def test_liquidity_token(self, stable_pair):
        lp = stable_pair.liquidity_token
        assert lp.chain_id == 1
        assert lp.address == compute_pair_address(TOKEN_A, TOKEN_B)
        assert lp.decimals == 18
        assert lp.symbol == "UNI-V2"
        assert lp.name == "Uniswap V2"

    def test_get_address_matches_liquidity_token(self, stable_pair):
        assert Pair.get_address(TOKEN_B, TOKEN_A) == stable_pair.liquidity_token.address

    def test_config_changes_liquidity_token(self):
        config = PairConfig(init_code_hash="0x" + "00" * 32, liquidity_token_symbol="S-LP")
        pair = make_pair(ONE, ONE, config=config)
        assert pair.liquidity_token.symbol == "S-LP"
        assert pair.liquidity_token.address != make_pair(ONE, ONE).liquidity_token.address

    def test_address_cache_is_used(self, address_cache):
        Pair(
            TokenAmount(TOKEN_A, ONE),
            TokenAmount(TOKEN_B, ONE),
            address_cache=address_cache,
        )
        assert len(address_cache) == 1

    def test_identical_tokens_raise(self):
        with pytest.raises(InvariantViolation):
            make_pair(ONE, ONE, token_a=TOKEN_A, token_b=TOKEN_A)

    def test_cross_chain_tokens_raise(self):
        other = Token(chain_id=5, address=TOKEN_B.address, decimals=18)
        with pytest.raises(InvariantViolation):
            make_pair(ONE, ONE, token_b=other)

    def test_default_curve_is_stable(self, stable_pair):
        assert stable_pair.curve is CurveKind.STABLE_SWAP
        assert stable_pair.config is DEFAULT_PAIR_CONFIG

    def test_curve_from_string(self):
        pair = make_pair(ONE, ONE, curve="constantProduct")
        assert pair.curve is CurveKind.CONSTANT_PRODUCT

    def test_repr(self, stable_pair):
        assert repr(stable_pair) == f"Pair({100 * ONE} A, {90 * ONE} B, curve=stableSwap)"


class TestPairAccessors:
    def test_chain_id(self, stable_pair):
        assert stable_pair.chain_id == 1

    def test_involves_token(self, stable_pair):
        assert stable_pair.involves_token(TOKEN_A)
        assert stable_pair.involves_token(TOKEN_B)
        assert not stable_pair.involves_token(TOKEN_C)

    def test_reserve_of(self, stable_pair):
        assert stable_pair.reserve_of(TOKEN_B).raw == 90 * ONE

    def test_reserve_of_foreign_token_raises(self, stable_pair):
        with pytest.raises(InvariantViolation) as exc_info:
            stable_pair.reserve_of(TOKEN_C)
        assert exc_info.value.code == "TOKEN"

    def test_other_token(self, stable_pair):
        assert stable_pair.other_token(TOKEN_A) == TOKEN_B
        assert stable_pair.other_token(TOKEN_B) == TOKEN_A

    def test_prices(self, stable_pair):
        assert stable_pair.token0_price.raw == Fraction(90, 100)
        assert stable_pair.token1_price.raw == Fraction(100, 90)
        assert stable_pair.price_of(TOKEN_A) == stable_pair.token0_price
        assert stable_pair.price_of(TOKEN_B) == stable_pair.token1_price

    def test_price_of_foreign_token_raises(self, stable_pair):
        with pytest.raises(InvariantViolation):
            stable_pair.price_of(TOKEN_C)


class TestPairExactInput:
    """Tests for get_output_amount."""

    def test_stable_quote_matches_pricer(self, stable_pair):
        output, _ = stable_pair.get_output_amount(TokenAmount(TOKEN_A, ONE))
        expected = StableSwapPricer().get_amount_out(ONE, 100 * ONE, 90 * ONE, 18, 18)
        assert output == TokenAmount(TOKEN_B, expected)

    def test_constant_product_quote_matches_pricer(self, constant_product_pair):
        output, _ = constant_product_pair.get_output_amount(TokenAmount(TOKEN_B, ONE))
        expected = ConstantProductPricer().get_amount_out(ONE, 90 * ONE, 100 * ONE)
        assert output == TokenAmount(TOKEN_A, expected)

    def test_returns_updated_pair(self, stable_pair):
        output, next_pair = stable_pair.get_output_amount(TokenAmount(TOKEN_A, ONE))
        assert next_pair.reserve0.raw == 101 * ONE
        assert next_pair.reserve1.raw == 90 * ONE - output.raw
        assert next_pair.curve is stable_pair.curve
        assert next_pair.liquidity_token == stable_pair.liquidity_token

    def test_swap_snapshot_reuses_liquidity_token(self, monkeypatch):
        calls = []

        def counting_compute(*args):
            calls.append(args)
            return compute_pair_address(*args)

        monkeypatch.setattr("pairswap.pair.compute_pair_address", counting_compute)
        pair = make_pair(100 * ONE, 90 * ONE)
        assert len(calls) == 1

        _, after_output = pair.get_output_amount(TokenAmount(TOKEN_B, ONE))
        _, after_input = after_output.get_input_amount(TokenAmount(TOKEN_A, ONE))

        assert len(calls) == 1
        assert after_output.liquidity_token is pair.liquidity_token
        assert after_input.liquidity_token is pair.liquidity_token
        assert after_output.token0 == TOKEN_A
        assert after_output.reserve1.raw == 91 * ONE
        assert after_input.reserve0.raw == after_output.reserve0.raw - ONE

    def test_original_pair_unchanged(self, stable_pair):
        stable_pair.get_output_amount(TokenAmount(TOKEN_A, ONE))
        assert stable_pair.reserve0.raw == 100 * ONE
        assert stable_pair.reserve1.raw == 90 * ONE

    def test_mixed_decimals(self):
        pair = make_pair(10**12, 10**24, token_a=USDC, token_b=DAI)
        output, _ = pair.get_output_amount(TokenAmount(USDC, 10**9))
        assert output.token == DAI
        assert 995 * ONE < output.raw <= 996 * ONE

    def test_foreign_token_raises(self, stable_pair):
        with pytest.raises(InvariantViolation):
            stable_pair.get_output_amount(TokenAmount(TOKEN_C, ONE))

    @pytest.mark.parametrize("reserves", [(0, ONE), (ONE, 0), (0, 0)])
    def test_zero_reserve_raises(self, reserves):
        pair = make_pair(*reserves)
        with pytest.raises(InsufficientReservesError):
            pair.get_output_amount(TokenAmount(TOKEN_A, ONE))

    def test_zero_input_raises(self, stable_pair):
        with pytest.raises(InsufficientInputAmountError):
            stable_pair.get_output_amount(TokenAmount(TOKEN_A, 0))


class TestPairExactOutput:
    """Tests for get_input_amount."""

    def test_stable_pair_prices_exact_output_on_constant_product(self, stable_pair):
        input_amount, _ = stable_pair.get_input_amount(TokenAmount(TOKEN_B, ONE))
        expected = ConstantProductPricer().get_amount_in(ONE, 100 * ONE, 90 * ONE)
        assert input_amount == TokenAmount(TOKEN_A, expected)

    def test_same_input_for_both_curves(self, stable_pair, constant_product_pair):
        stable_in, _ = stable_pair.get_input_amount(TokenAmount(TOKEN_A, ONE))
        cp_in, _ = constant_product_pair.get_input_amount(TokenAmount(TOKEN_A, ONE))
        assert stable_in == cp_in

    def test_returns_updated_pair(self, stable_pair):
        input_amount, next_pair = stable_pair.get_input_amount(TokenAmount(TOKEN_B, ONE))
        assert next_pair.reserve0.raw == 100 * ONE + input_amount.raw
        assert next_pair.reserve1.raw == 89 * ONE

    @pytest.mark.parametrize("amount", [90 * ONE, 91 * ONE])
    def test_output_not_below_reserve_raises(self, stable_pair, amount):
        with pytest.raises(InsufficientReservesError):
            stable_pair.get_input_amount(TokenAmount(TOKEN_B, amount))

    def test_zero_reserve_raises(self):
        pair = make_pair(0, ONE)
        with pytest.raises(InsufficientReservesError):
            pair.get_input_amount(TokenAmount(TOKEN_B, 1))

    def test_foreign_token_raises(self, stable_pair):
        with pytest.raises(InvariantViolation):
            stable_pair.get_input_amount(TokenAmount(TOKEN_C, 1))
