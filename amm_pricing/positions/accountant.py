"""Position accounting.

Reports how much of a staked position is claimable under vesting and what
share of the pool's reserves that claimable balance redeems for.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from amm_pricing.constants import VESTING_RATIO_SCALE
from amm_pricing.errors import InvalidInputError
from amm_pricing.math.accumulator import AccumulatorRatio
from amm_pricing.math.scaled_decimal import ScaledDecimal
from amm_pricing.positions.types import FullyVested, PartiallyVested, PositionSnapshot
from amm_pricing.safe_int import S

logger = structlog.get_logger()


class PositionAccountant:
    """Stateless accounting over position snapshots."""

    def claimable_balance(self, position: PositionSnapshot) -> int:
        """Currently claimable part of the position value.

        Fully vested positions return ``value``. Partially vested ones return
        ``value * ratio`` floored and clamped into ``[0, value]``.
        """
        vesting = position.vesting
        if isinstance(vesting, FullyVested):
            return position.value
        if isinstance(vesting, PartiallyVested):
            amount = vesting.ratio.mul_int(position.value)
            return S(max(amount, 0)).min(position.value).value
        raise TypeError(f"Unsupported vesting state: {type(vesting).__name__}")

    def share_ratio(self, position: PositionSnapshot) -> float:
        """Claimable balance as a fraction of LP supply (display only)."""
        lp_supply = position.pool.lp_supply
        if lp_supply == 0:
            return 0.0
        return self.claimable_balance(position) / lp_supply

    def share_coin_amounts(self, position: PositionSnapshot) -> tuple[int, int]:
        """Reserve amounts the claimable balance redeems for.

        Returns:
            Tuple of (x_amount, y_amount); (0, 0) when LP supply is zero
        """
        pool = position.pool
        if pool.lp_supply == 0:
            return 0, 0
        claimable = S(self.claimable_balance(position))
        x_amount = claimable * S(pool.x) // S(pool.lp_supply)
        y_amount = claimable * S(pool.y) // S(pool.lp_supply)
        return x_amount.value, y_amount.value

    def with_partial_ratio(
        self, position: PositionSnapshot, ratio: ScaledDecimal
    ) -> PositionSnapshot:
        """Return a copy of ``position`` whose claimable part is ``ratio``.

        The input snapshot is left untouched.

        Raises:
            InvalidInputError: If ratio is outside [0, 1]
        """
        if not ratio.is_unit_interval():
            raise InvalidInputError(f"Vesting ratio must be in range [0, 1], got {ratio}")
        return replace(position, vesting=PartiallyVested(ratio))

    def linear_vesting_ratio(
        self, position: PositionSnapshot, epoch: int, scale: int = VESTING_RATIO_SCALE
    ) -> ScaledDecimal:
        """Linear vesting progress at ``epoch`` over ``[start_epoch, end_epoch)``.

        Returns:
            0 before the window, 1 at or after its end (or for an empty
            window), otherwise the elapsed fraction floored at ``scale``
            fractional digits
        """
        start, end = position.start_epoch, position.end_epoch
        if end <= start or epoch >= end:
            return ScaledDecimal.one()
        if epoch <= start:
            return ScaledDecimal.zero()
        return ScaledDecimal.from_fraction(epoch - start, end - start, scale)

    def accrued_mining_reward(self, position: PositionSnapshot) -> int:
        """Mining reward accrued since deposit on the claimable balance."""
        claimable = self.claimable_balance(position)
        reward = AccumulatorRatio.diff(
            position.pool.mining.ampt, position.pool_mining_ampt, claimable
        )
        logger.debug(
            "mining_reward_accrued",
            position=position.address,
            claimable=claimable,
            reward=reward,
        )
        return reward


# Accountant instance for callers that do not need their own
default_accountant = PositionAccountant()
