"""Basis-point fee stages.

Each stage cuts ``amount * fee_bps // 10000`` from the working amount.
Stages are applied one after another on the post-cut amount, never as a
combined rate, so rounding matches settlement exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from amm_pricing.constants import BPS_SCALING
from amm_pricing.safe_int import S


def bps_fee(amount: int, fee_bps: int) -> int:
    """Fee owed on ``amount`` at ``fee_bps``, truncated toward zero."""
    if amount <= 0 or fee_bps <= 0:
        return 0
    return (S(amount) * S(fee_bps) // S(BPS_SCALING)).value


@dataclass(frozen=True)
class FeeCut:
    """Result of one fee stage."""

    fee: int
    remaining: int


def apply_bps_fee(amount: int, fee_bps: int) -> FeeCut:
    """Subtract one basis-point fee from ``amount``."""
    fee = bps_fee(amount, fee_bps)
    return FeeCut(fee=fee, remaining=(S(amount) - S(fee)).value)


@dataclass(frozen=True)
class ProtocolFeeCut:
    """Admin then token-holder cut taken on the fee-collection side."""

    admin_fee: int
    th_fee: int
    remaining: int


def apply_protocol_fees(amount: int, admin_bps: int, th_bps: int) -> ProtocolFeeCut:
    """Take the admin fee, then the token-holder fee on what is left."""
    admin = apply_bps_fee(amount, admin_bps)
    th = apply_bps_fee(admin.remaining, th_bps)
    return ProtocolFeeCut(admin_fee=admin.fee, th_fee=th.fee, remaining=th.remaining)
