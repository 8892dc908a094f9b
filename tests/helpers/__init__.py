"""Test helpers module for shared test utilities.

- constants: Token identities and decimals
- factories: Pool, position and token factory functions
"""

from tests.helpers.constants import (
    ETH,
    KRIYA,
    POOL_ADDRESS,
    POSITION_ADDRESS,
    SUI,
    TOKEN_DECIMALS,
    USDC,
    USDT,
)
from tests.helpers.factories import make_pool, make_position, make_stable_pool, make_token

__all__ = [
    # Constants
    "SUI",
    "USDC",
    "USDT",
    "ETH",
    "KRIYA",
    "TOKEN_DECIMALS",
    "POOL_ADDRESS",
    "POSITION_ADDRESS",
    # Factories
    "make_pool",
    "make_stable_pool",
    "make_position",
    "make_token",
]
