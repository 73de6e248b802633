"""Pytest configuration and fixtures."""

import pytest

from amm_sdk import Pair
from tests.helpers import DAI, ONE, USDC, make_boosted_pair, make_pair


@pytest.fixture
def classic_pair() -> Pair:
    """100 USDC / 100 DAI on the classic curve, 30 bps."""
    return make_pair(USDC, 100 * ONE, DAI, 100 * ONE)


@pytest.fixture
def boosted_pair() -> Pair:
    """100 USDC / 100 DAI on the boosted curve, boost 10, 30 bps."""
    return make_boosted_pair(USDC, 100 * ONE, DAI, 100 * ONE, boost=10)


@pytest.fixture
def skewed_boosted_pair() -> Pair:
    """40 USDC / 10 DAI on the boosted curve, boost 10, 30 bps."""
    return make_boosted_pair(USDC, 40 * ONE, DAI, 10 * ONE, boost=10)
