"""Pair aggregate, swap math and pair address derivation."""

from amm_sdk.amm.address import compute_pair_address
from amm_sdk.amm.pair import Pair
from amm_sdk.amm.swap import get_amount_in, get_amount_out

__all__ = ["Pair", "compute_pair_address", "get_amount_in", "get_amount_out"]
