"""Constant product curve math.

The curve keeps ``x * y = k``. Fees are taken by the caller before and
after this step, so the formulas here are fee-free.
"""

from __future__ import annotations

from amm_pricing.safe_int import S


def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """Calculate output amount using the constant product formula.

    Formula: amount_out = reserve_out * amount_in / (reserve_in + amount_in)

    Args:
        amount_in: Fee-net input amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool

    Returns:
        Output token amount (truncated)
    """
    if amount_in <= 0:
        return 0
    if reserve_in <= 0 or reserve_out <= 0:
        return 0

    numerator = S(reserve_out) * S(amount_in)
    denominator = S(reserve_in) + S(amount_in)
    return (numerator // denominator).value


def proportional_amount(amount: int, reserve_from: int, reserve_to: int) -> int:
    """Amount of the other token matching ``amount`` at the pool ratio.

    Returns 0 when ``reserve_from`` is zero.
    """
    if reserve_from == 0:
        return 0
    return (S(reserve_to) * S(amount) // S(reserve_from)).value


def spot_price(reserve_x: int, reserve_y: int, x_decimals: int, y_decimals: int) -> float:
    """Marginal price of X in Y, in display units.

    From ``x * y = k``: ``x*dy + y*dx = 0`` so ``-dy/dx = y/x``.
    Returns 0.0 when ``reserve_x`` is zero.
    """
    if reserve_x == 0:
        return 0.0
    price_abs = reserve_y / reserve_x
    return price_abs * (10.0**x_decimals) / (10.0**y_decimals)
