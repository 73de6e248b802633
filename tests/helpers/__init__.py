"""Test helpers module for shared test utilities.

- constants: Tokens and common amounts
- factories: Pair factory functions
"""

from tests.helpers.constants import DAI, ONE, USDC, USDC6, WETH_BSCTESTNET, WETH_MAINNET
from tests.helpers.factories import make_boosted_pair, make_pair

__all__ = [
    # Constants
    "DAI",
    "ONE",
    "USDC",
    "USDC6",
    "WETH_MAINNET",
    "WETH_BSCTESTNET",
    # Factories
    "make_pair",
    "make_boosted_pair",
]
