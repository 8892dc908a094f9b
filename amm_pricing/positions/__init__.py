"""Staked position accounting."""

from amm_pricing.positions.accountant import PositionAccountant, default_accountant
from amm_pricing.positions.types import (
    FullyVested,
    PartiallyVested,
    PositionSnapshot,
    Vesting,
)

__all__ = [
    "PositionAccountant",
    "default_accountant",
    "PositionSnapshot",
    "Vesting",
    "FullyVested",
    "PartiallyVested",
]
