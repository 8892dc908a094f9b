"""Position snapshot types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from amm_pricing.math.accumulator import AccumulatorRatio
from amm_pricing.math.scaled_decimal import ScaledDecimal
from amm_pricing.pools.types import PoolSnapshot


@dataclass(frozen=True)
class FullyVested:
    """The whole position value is claimable."""


@dataclass(frozen=True)
class PartiallyVested:
    """Only ``ratio`` (in [0, 1]) of the position value is claimable."""

    ratio: ScaledDecimal


# Vesting state; callers must handle the fully vested case explicitly
Vesting: TypeAlias = FullyVested | PartiallyVested


@dataclass(frozen=True)
class PositionSnapshot:
    """Immutable snapshot of a staked liquidity position.

    Attributes:
        address: Position object id
        pool: Pool the position belongs to
        value: Deposited LP value
        pool_x: Pool X reserve captured at deposit
        pool_y: Pool Y reserve captured at deposit
        pool_mining_ampt: Pool mining accumulator captured at deposit
        start_epoch: First epoch of the vesting window
        end_epoch: Epoch the position is fully vested (exclusive bound)
        boost_multiplier: Reward boost for the chosen lock length
        vesting: FullyVested or PartiallyVested(ratio)
    """

    address: str
    pool: PoolSnapshot
    value: int
    pool_x: int = 0
    pool_y: int = 0
    pool_mining_ampt: AccumulatorRatio = field(default_factory=AccumulatorRatio.zero)
    start_epoch: int = 0
    end_epoch: int = 0
    boost_multiplier: int = 1
    vesting: Vesting = field(default_factory=FullyVested)

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Position value cannot be negative: {self.value}")
