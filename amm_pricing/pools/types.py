"""Pool snapshot dataclasses.

Read-only views of a pool's on-chain state, built by the data layer and
consumed by the pricing engine and position accountant.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TypeAlias

from amm_pricing.constants import BPS_SCALING
from amm_pricing.math.accumulator import AccumulatorRatio


class FeeDirection(str, Enum):
    """Token side the admin and token-holder fees are collected in."""

    X = "X"
    Y = "Y"


class TokenHolderRewardType(str, Enum):
    """How token-holder fees are distributed."""

    BALANCE = "Balance"
    AUTO_BUY_BACK = "AutoBuyBack"


@dataclass(frozen=True)
class ConstantProductCurve:
    """x * y = k pool. Carries no curve parameters."""


@dataclass(frozen=True)
class StableCurve:
    """Stable-swap pool.

    Attributes:
        amp: Amplification parameter A (unscaled, as stored on-chain)
        x_scale: Factor raising X amounts to the common solver scale
        y_scale: Factor raising Y amounts to the common solver scale
    """

    amp: int
    x_scale: int = 1
    y_scale: int = 1

    def __post_init__(self) -> None:
        if self.amp <= 0:
            raise ValueError(f"Stable amplification must be positive, got {self.amp}")
        if self.x_scale <= 0 or self.y_scale <= 0:
            raise ValueError(
                f"Stable scale factors must be positive, got {self.x_scale}/{self.y_scale}"
            )


# Tagged union of curve kinds; pricing dispatches on the concrete type
Curve: TypeAlias = ConstantProductCurve | StableCurve


@dataclass(frozen=True)
class FeeSchedule:
    """Pool fee rates in basis points.

    Attributes:
        direction: Side the admin and token-holder fees are taken from
        admin_bps: Admin (protocol) fee
        lp_bps: Liquidity-provider fee, always taken from the input side
        th_bps: Token-holder fee, taken after the admin fee
        withdraw_bps: Fee charged on liquidity withdrawal
    """

    direction: FeeDirection = FeeDirection.X
    admin_bps: int = 0
    lp_bps: int = 0
    th_bps: int = 0
    withdraw_bps: int = 0

    def __post_init__(self) -> None:
        for name, v in (
            ("admin_bps", self.admin_bps),
            ("lp_bps", self.lp_bps),
            ("th_bps", self.th_bps),
            ("withdraw_bps", self.withdraw_bps),
        ):
            if not (0 <= v <= BPS_SCALING):
                raise ValueError(f"{name} must be in [0, {BPS_SCALING}]: {v}")

    def total_admin_fee(self) -> int:
        return self.admin_bps

    def total_lp_fee(self) -> int:
        return self.lp_bps

    def total_th_fee(self) -> int:
        return self.th_bps


@dataclass(frozen=True)
class TradeVolume:
    """Cumulative traded amounts, in raw token units."""

    total_x: int = 0
    total_y: int = 0
    last_epoch_x: int = 0
    last_epoch_y: int = 0
    current_epoch_x: int = 0
    current_epoch_y: int = 0

    def rolling_x(self) -> int:
        """Larger of the current and previous epoch X volume."""
        return max(self.current_epoch_x, self.last_epoch_x)

    def rolling_y(self) -> int:
        """Larger of the current and previous epoch Y volume."""
        return max(self.current_epoch_y, self.last_epoch_y)


@dataclass(frozen=True)
class MiningState:
    """Liquidity mining emission state."""

    speed: int = 0
    ampt: AccumulatorRatio = field(default_factory=AccumulatorRatio.zero)
    last_epoch: int = 0


@dataclass(frozen=True)
class BoostMultiplier:
    """Boost applied to positions locked for ``epoch`` epochs."""

    epoch: int
    multiplier: int


@dataclass(frozen=True)
class TokenHolderReward:
    """Token-holder reward pool state."""

    reward_type: TokenHolderRewardType = TokenHolderRewardType.BALANCE
    x: int = 0
    y: int = 0
    x_supply: int = 0
    y_supply: int = 0
    n_epoch: int = 0
    start_epoch: int = 0
    end_epoch: int = 0
    total_stake_amount: int = 0
    total_stake_boost: int = 0


@dataclass(frozen=True)
class PoolSnapshot:
    """Immutable snapshot of a two-token pool.

    Attributes:
        address: Pool object id
        x_coin: Token identity of the X side
        y_coin: Token identity of the Y side
        curve: ConstantProductCurve or StableCurve
        x: X reserve in raw units
        y: Y reserve in raw units
        fees: Fee rates and fee-collection side
        frozen: Trading halted by the pool admin
        lp_supply: Outstanding LP (position value) supply
    """

    address: str
    x_coin: str
    y_coin: str
    curve: Curve
    x: int
    y: int
    fees: FeeSchedule = field(default_factory=FeeSchedule)
    frozen: bool = False
    lp_supply: int = 0
    index: int = 0
    x_admin: int = 0
    y_admin: int = 0
    x_th: int = 0
    y_th: int = 0
    trade_volume: TradeVolume = field(default_factory=TradeVolume)
    mining: MiningState = field(default_factory=MiningState)
    boost_multipliers: tuple[BoostMultiplier, ...] = ()
    token_holder_reward: TokenHolderReward | None = None

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Pool reserves cannot be negative: x={self.x}, y={self.y}")
        if self.lp_supply < 0:
            raise ValueError(f"LP supply cannot be negative: {self.lp_supply}")

    @property
    def is_initialized(self) -> bool:
        """True once both reserves are funded."""
        return self.x > 0 and self.y > 0

    @property
    def is_stable(self) -> bool:
        return isinstance(self.curve, StableCurve)

    def with_reserves(self, x: int, y: int) -> PoolSnapshot:
        """Return a copy with different reserves."""
        return replace(self, x=x, y=y)

    def boost_multiplier_for(self, epochs: int) -> int | None:
        """Boost configured for a lock of exactly ``epochs`` epochs, if any."""
        for entry in self.boost_multipliers:
            if entry.epoch == epochs:
                return entry.multiplier
        return None
