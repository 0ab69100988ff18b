"""Pytest configuration and fixtures."""

import pytest

from pairswap.address import PairAddressCache
from pairswap.amm import CurveKind
from pairswap.pair import Pair
from tests.helpers import ONE, make_pair


@pytest.fixture
def stable_pair() -> Pair:
    """Stable-swap pair with 100 TOKEN_A and 90 TOKEN_B."""
    return make_pair(100 * ONE, 90 * ONE)


@pytest.fixture
def constant_product_pair() -> Pair:
    """Constant-product pair with 100 TOKEN_A and 90 TOKEN_B."""
    return make_pair(100 * ONE, 90 * ONE, curve=CurveKind.CONSTANT_PRODUCT)


@pytest.fixture
def small_pair() -> Pair:
    """Stable-swap pair with 1000 raw units of each token, for liquidity math."""
    return make_pair(1000, 1000)


@pytest.fixture
def address_cache() -> PairAddressCache:
    """Fresh, unbounded pair address cache."""
    return PairAddressCache()
