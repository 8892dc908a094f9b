"""Pricing result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PoolUnavailableReason(Enum):
    """Why a pool cannot be traded against."""

    FROZEN = "Pool is frozen"
    EMPTY = "Pool is empty, deposit first"
    UNKNOWN = "Pool is not available"


class SwapDirection(str, Enum):
    """Trade direction relative to the pool's (X, Y) ordering."""

    FORWARD = "forward"  # X in, Y out
    REVERSE = "reverse"  # Y in, X out


@dataclass(frozen=True)
class SwapQuote:
    """Exact-input quote with its full fee breakdown.

    Input-side protocol fees are non-zero only when the pool collects fees in
    the input token; output-side protocol fees only when it collects in the
    output token. The LP fee is always taken from the input.

    Attributes:
        direction: FORWARD (X -> Y) or REVERSE (Y -> X)
        amount_in: Gross input amount
        admin_fee_in: Admin fee cut from the input
        th_fee_in: Token-holder fee cut from the post-admin input
        lp_fee: Liquidity-provider fee cut from the input
        net_amount_in: Input that reaches the curve
        raw_amount_out: Curve output before output-side fees
        admin_fee_out: Admin fee cut from the output
        th_fee_out: Token-holder fee cut from the post-admin output
        amount_out: Amount the trader receives
        min_amount_out: Slippage-protected minimum, if a tolerance was given
    """

    direction: SwapDirection
    amount_in: int
    admin_fee_in: int
    th_fee_in: int
    lp_fee: int
    net_amount_in: int
    raw_amount_out: int
    admin_fee_out: int
    th_fee_out: int
    amount_out: int
    min_amount_out: int | None = None

    @property
    def admin_fee(self) -> int:
        return self.admin_fee_in + self.admin_fee_out

    @property
    def th_fee(self) -> int:
        return self.th_fee_in + self.th_fee_out

    @property
    def is_executable(self) -> bool:
        """False when the trade would yield nothing."""
        return self.amount_out > 0
