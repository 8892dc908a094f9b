"""Two-coin stable-swap (Curve-style) math.

Core math for stable pools. Uses Newton-Raphson iteration for the
invariant D and for the post-trade output reserve.

The amplification parameter follows the settlement contract's convention
``Ann = A * n`` with ``n = 2``: the leverage term is ``2 * A * (b + q)`` in
the D update and the y solver uses ``D / (2A)`` and ``D^3 / (8A(x + dx))``.
All intermediate products are exact Python ints; every division floors on
non-negative operands exactly as the contract's unsigned integer math does.
"""

from __future__ import annotations

import structlog

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.errors import StableSolverDidNotConverge

logger = structlog.get_logger()

__all__ = [
    "compute_d",
    "compute_y",
    "compute_y_scaled",
    "compute_d_decimal",
    "compute_y_decimal",
    "price_rational",
]


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's // floors toward -inf; the contract truncates. The two differ
    only when the operands have different signs (a negative stable output).
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _converged(current: int, previous: int) -> bool:
    return abs(current - previous) <= 1


def _not_converged(solver: str, config: PricingConfig, estimate: int) -> int:
    if config.strict_convergence:
        raise StableSolverDidNotConverge(
            f"Stable {solver} did not converge after {config.max_iterations} iterations"
        )
    logger.warning(
        "stable_solver_not_converged",
        solver=solver,
        iterations=config.max_iterations,
        estimate=estimate,
    )
    return estimate


def _next_d(d: int, d_prod: int, sum_balances: int, amp: int) -> int:
    leverage = sum_balances * 2 * amp
    numerator = d * (2 * d_prod + leverage)
    denominator = d * (2 * amp - 1) + 3 * d_prod
    return numerator // denominator


def compute_d(b: int, q: int, amp: int, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> int:
    """Calculate the stable-swap invariant D for two balances.

    Algorithm:
        1. Initial guess: D = b + q
        2. d_prod = D^3 / (4 * b * q), computed as two divisions to bound size
        3. D' = D * (2 * d_prod + 2A(b + q)) / (D * (2A - 1) + 3 * d_prod)
        4. Stop when |D' - D| <= 1, or after ``config.max_iterations`` steps

    Args:
        b: First balance (already on a common decimal scale with q)
        q: Second balance
        amp: Amplification parameter A (unscaled, as stored on-chain)
        config: Iteration budget and convergence policy

    Returns:
        The invariant D. Zero when either balance is zero.

    Raises:
        StableSolverDidNotConverge: Only when ``config.strict_convergence``
    """
    sum_balances = b + q
    if sum_balances == 0 or b == 0 or q == 0:
        return 0

    d = sum_balances
    for _ in range(config.max_iterations):
        d_prod = d * d // (2 * b)
        d_prod = d_prod * d // (2 * q)
        d_prev = d
        d = _next_d(d, d_prod, sum_balances, amp)
        if _converged(d, d_prev):
            return d

    return _not_converged("compute_d", config, d)


def compute_y(
    dx: int,
    x: int,
    y: int,
    amp: int,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> int:
    """Calculate the output amount for adding ``dx`` to reserve ``x``.

    Solves for the new output reserve y' that preserves D:

        y'_{n+1} = (y'^2 + c) / (2y' + b - D)
        c = D^3 / (8A(x + dx))      computed as D*D/(2(x+dx)) then *D/(4A)
        b = D / (2A) + (x + dx)

    starting from y'_0 = D.

    The result is ``y - y' - 1``: one unit is kept by the pool so integer
    truncation can never break the invariant. Values <= 0 mean there is no
    executable trade; the sign is preserved for callers.

    Args:
        dx: Fee-net input amount
        x: Input-side reserve
        y: Output-side reserve
        amp: Amplification parameter A
        config: Iteration budget and convergence policy

    Returns:
        Output amount (may be zero or negative)
    """
    d = compute_d(x, y, amp, config)
    x_new = x + dx

    c = (d * d) // (2 * x_new)
    c = (c * d) // (4 * amp)
    b = d // (2 * amp) + x_new

    y_new = d
    for _ in range(config.max_iterations):
        y_prev = y_new
        numerator = y_new * y_new + c
        denominator = 2 * y_new + b - d
        if denominator <= 0:
            logger.warning(
                "stable_solver_degenerate_denominator",
                dx=dx,
                x=x,
                y=y,
                amp=amp,
                estimate=y_new,
            )
            break
        y_new = numerator // denominator
        if _converged(y_new, y_prev):
            break
    else:
        y_new = _not_converged("compute_y", config, y_new)

    return y - y_new - 1


def compute_y_scaled(
    dx: int,
    x: int,
    y: int,
    amp: int,
    x_scale: int,
    y_scale: int,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> int:
    """Run ``compute_y`` on reserves multiplied by per-side scale factors.

    The result is divided back by ``y_scale``, truncating toward zero.

    Args:
        dx: Fee-net input amount in input-token units
        x: Input-side reserve
        y: Output-side reserve
        amp: Amplification parameter A
        x_scale: Factor bringing input-token units to the common scale
        y_scale: Factor bringing output-token units to the common scale
        config: Iteration budget and convergence policy

    Returns:
        Output amount in output-token units (may be zero or negative)
    """
    dy = compute_y(dx * x_scale, x * x_scale, y * y_scale, amp, config)
    return _div_trunc(dy, y_scale)


def _decimal_factors(decimals_a: int, decimals_b: int) -> tuple[int, int]:
    common = max(decimals_a, decimals_b)
    return 10 ** (common - decimals_a), 10 ** (common - decimals_b)


def compute_d_decimal(
    b: int,
    q: int,
    amp: int,
    b_decimals: int,
    q_decimals: int,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> int:
    """Invariant D for balances with different token decimals.

    Both balances are raised to the larger of the two decimals first, so D is
    expressed at that common scale.
    """
    b_factor, q_factor = _decimal_factors(b_decimals, q_decimals)
    return compute_d(b * b_factor, q * q_factor, amp, config)


def compute_y_decimal(
    dx: int,
    x: int,
    y: int,
    amp: int,
    x_decimals: int,
    y_decimals: int,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> int:
    """Output amount for tokens with different decimals.

    Normalizes both sides to the larger decimals, solves, and scales the
    output back down to ``y_decimals``.
    """
    x_factor, y_factor = _decimal_factors(x_decimals, y_decimals)
    return compute_y_scaled(dx, x, y, amp, x_factor, y_factor, config)


def price_rational(
    x: int,
    y: int,
    amp: int,
    x_decimals: int,
    y_decimals: int,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> tuple[int, int]:
    """Marginal price of X in Y as an exact fraction ``(pn, pd)``.

    Ratio of the invariant's partial derivatives at the current reserves,
    with q = x and b = y normalized to the larger decimals:

        pn = b * (D + 4A(2q + b - D))
        pd = q * (D + 4A(2b + q - D))

    Args:
        x: X reserve (quote side)
        y: Y reserve (base side)
        amp: Amplification parameter A
        x_decimals: Decimals of the X token
        y_decimals: Decimals of the Y token
        config: Iteration budget and convergence policy

    Returns:
        Tuple of (numerator, denominator); the denominator may be zero for
        degenerate reserves
    """
    q_factor, b_factor = _decimal_factors(x_decimals, y_decimals)
    q1 = x * q_factor
    b1 = y * b_factor
    d = compute_d(b1, q1, amp, config)

    four_a = 4 * amp
    pn = b1 * (d + four_a * (2 * q1 + b1 - d))
    pd = q1 * (d + four_a * (2 * b1 + q1 - d))
    return pn, pd
