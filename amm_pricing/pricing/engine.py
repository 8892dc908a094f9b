"""Pool pricing engine.

Quotes trades, spot prices, proportional deposits and display valuations
from an immutable PoolSnapshot. The engine only quotes; applying a trade is
the settlement layer's job.

Fee order for an exact-input swap (must match settlement exactly):
    1. If fees are collected in the input token: admin fee, then
       token-holder fee on the post-admin amount
    2. LP fee on the remaining input (always input side)
    3. Curve math on the fee-net input
    4. If fees are collected in the output token: admin fee, then
       token-holder fee on the output
"""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR

import structlog

from amm_pricing.amm import constant_product, stable_math
from amm_pricing.amm.fees import apply_bps_fee, apply_protocol_fees
from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.errors import PoolNotAvailableError
from amm_pricing.pools.tokens import TokenInfo
from amm_pricing.pools.types import (
    ConstantProductCurve,
    FeeDirection,
    PoolSnapshot,
    StableCurve,
)
from amm_pricing.pricing.requests import (
    QuoteRequest,
    slippage_to_decimal,
    validate_trade_amount,
)
from amm_pricing.pricing.results import PoolUnavailableReason, SwapDirection, SwapQuote
from amm_pricing.safe_int import S

logger = structlog.get_logger()


class PoolPricingEngine:
    """Stateless pricing over pool snapshots.

    Args:
        config: Solver budget and convergence policy. Defaults to
            DEFAULT_PRICING_CONFIG.
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        self.config = config or DEFAULT_PRICING_CONFIG

    # --- Availability ---

    def unavailable_reason(self, pool: PoolSnapshot) -> PoolUnavailableReason | None:
        """Reason the pool cannot be swapped against, or None if it can."""
        if pool.frozen:
            return PoolUnavailableReason.FROZEN
        if pool.x == 0 or pool.y == 0:
            return PoolUnavailableReason.EMPTY
        return None

    def is_available_for_swap(self, pool: PoolSnapshot) -> bool:
        return self.unavailable_reason(pool) is None

    def swap_direction(
        self, pool: PoolSnapshot, coin_in: str, coin_out: str
    ) -> SwapDirection | None:
        """Direction for trading ``coin_in`` into ``coin_out``, or None if the
        pool does not hold that pair."""
        if coin_in == pool.x_coin and coin_out == pool.y_coin:
            return SwapDirection.FORWARD
        if coin_in == pool.y_coin and coin_out == pool.x_coin:
            return SwapDirection.REVERSE
        return None

    def can_swap_coins(self, pool: PoolSnapshot, coin_a: str, coin_b: str) -> bool:
        """True if the pool is tradable and holds exactly this pair."""
        return (
            pool.is_initialized
            and self.is_available_for_swap(pool)
            and self.swap_direction(pool, coin_a, coin_b) is not None
        )

    # --- Prices ---

    def spot_price(self, pool: PoolSnapshot, x_decimals: int, y_decimals: int) -> float:
        """Marginal price of one X in Y, in display units.

        For display only. Returns 0.0 when the price is undefined (empty
        reserve, zero denominator, NaN or overflow).
        """
        if pool.x == 0 or pool.y == 0:
            return 0.0

        curve = pool.curve
        if isinstance(curve, StableCurve):
            pn, pd = stable_math.price_rational(
                pool.x, pool.y, curve.amp, x_decimals, y_decimals, self.config
            )
            if pd == 0:
                return 0.0
            try:
                value = pn / pd
            except OverflowError:
                return 0.0
        else:
            value = constant_product.spot_price(pool.x, pool.y, x_decimals, y_decimals)

        if math.isnan(value) or math.isinf(value):
            return 0.0
        return value

    # --- Quotes ---

    def quote(
        self,
        pool: PoolSnapshot,
        amount: int,
        direction: SwapDirection = SwapDirection.FORWARD,
        slippage: float | None = None,
    ) -> SwapQuote:
        """Quote an exact-input swap.

        Args:
            pool: Pool snapshot
            amount: Gross input amount, in (0, 2^64-1]
            direction: FORWARD (X -> Y) or REVERSE (Y -> X)
            slippage: Optional tolerance in [0, 1] used to fill min_amount_out

        Returns:
            SwapQuote with the fee breakdown

        Raises:
            InvalidAmountError: If amount is out of range
            InvalidSlippageError: If slippage is out of range
            PoolNotAvailableError: If the pool is frozen or empty
        """
        amount = validate_trade_amount(amount)
        reason = self.unavailable_reason(pool)
        if reason is not None:
            raise PoolNotAvailableError(reason, pool.address)

        fees = pool.fees
        if direction == SwapDirection.FORWARD:
            input_side, output_side = FeeDirection.X, FeeDirection.Y
            reserve_in, reserve_out = pool.x, pool.y
        else:
            input_side, output_side = FeeDirection.Y, FeeDirection.X
            reserve_in, reserve_out = pool.y, pool.x

        working = amount
        admin_fee_in = th_fee_in = 0
        if fees.direction == input_side:
            cut = apply_protocol_fees(working, fees.admin_bps, fees.th_bps)
            admin_fee_in, th_fee_in, working = cut.admin_fee, cut.th_fee, cut.remaining

        lp_cut = apply_bps_fee(working, fees.lp_bps)
        net_amount_in = lp_cut.remaining

        raw_amount_out = self._curve_amount_out(pool, net_amount_in, reserve_in, reserve_out, direction)

        amount_out = raw_amount_out
        admin_fee_out = th_fee_out = 0
        if fees.direction == output_side:
            cut = apply_protocol_fees(amount_out, fees.admin_bps, fees.th_bps)
            admin_fee_out, th_fee_out, amount_out = cut.admin_fee, cut.th_fee, cut.remaining

        min_amount_out = None
        if slippage is not None:
            min_amount_out = self._apply_slippage(amount_out, slippage)

        logger.debug(
            "swap_quoted",
            pool=pool.address,
            direction=direction.value,
            amount_in=amount,
            net_amount_in=net_amount_in,
            amount_out=amount_out,
        )

        return SwapQuote(
            direction=direction,
            amount_in=amount,
            admin_fee_in=admin_fee_in,
            th_fee_in=th_fee_in,
            lp_fee=lp_cut.fee,
            net_amount_in=net_amount_in,
            raw_amount_out=raw_amount_out,
            admin_fee_out=admin_fee_out,
            th_fee_out=th_fee_out,
            amount_out=amount_out,
            min_amount_out=min_amount_out,
        )

    def quote_request(self, pool: PoolSnapshot, request: QuoteRequest) -> SwapQuote:
        """Quote a pre-validated QuoteRequest."""
        return self.quote(pool, request.amount, request.direction, request.slippage)

    def quote_x_to_y(self, pool: PoolSnapshot, dx: int) -> int:
        """Output Y for an exact X input, after all fees."""
        return self.quote(pool, dx, SwapDirection.FORWARD).amount_out

    def quote_y_to_x(self, pool: PoolSnapshot, dy: int) -> int:
        """Output X for an exact Y input, after all fees."""
        return self.quote(pool, dy, SwapDirection.REVERSE).amount_out

    def min_output_amount(
        self,
        pool: PoolSnapshot,
        amount: int,
        slippage: float,
        direction: SwapDirection = SwapDirection.FORWARD,
    ) -> int:
        """Slippage-protected minimum output for an exact-input swap.

        ``quoted * floor((1 - slippage) * 1e9) // 1e9``
        """
        quoted = self.quote(pool, amount, direction).amount_out
        return self._apply_slippage(quoted, slippage)

    def min_output_x_to_y(self, pool: PoolSnapshot, dx: int, slippage: float) -> int:
        return self.min_output_amount(pool, dx, slippage, SwapDirection.FORWARD)

    def min_output_y_to_x(self, pool: PoolSnapshot, dy: int, slippage: float) -> int:
        return self.min_output_amount(pool, dy, slippage, SwapDirection.REVERSE)

    def _apply_slippage(self, quoted: int, slippage: float) -> int:
        tolerance = slippage_to_decimal(slippage)
        scale = self.config.slippage_scale
        multiplier = int(((1 - tolerance) * scale).to_integral_value(rounding=ROUND_FLOOR))
        return (S(quoted) * S(multiplier) // S(scale)).value

    def _curve_amount_out(
        self,
        pool: PoolSnapshot,
        net_amount_in: int,
        reserve_in: int,
        reserve_out: int,
        direction: SwapDirection,
    ) -> int:
        curve = pool.curve
        if isinstance(curve, ConstantProductCurve):
            return constant_product.get_amount_out(net_amount_in, reserve_in, reserve_out)

        if isinstance(curve, StableCurve):
            if net_amount_in <= 0:
                return 0
            if direction == SwapDirection.FORWARD:
                scale_in, scale_out = curve.x_scale, curve.y_scale
            else:
                scale_in, scale_out = curve.y_scale, curve.x_scale
            amount_out = stable_math.compute_y_scaled(
                net_amount_in,
                reserve_in,
                reserve_out,
                curve.amp,
                scale_in,
                scale_out,
                self.config,
            )
            if amount_out <= 0:
                # Rounding bias ate the whole output; nothing is executable
                logger.debug(
                    "stable_output_not_executable",
                    pool=pool.address,
                    net_amount_in=net_amount_in,
                    raw_output=amount_out,
                )
                return 0
            return amount_out

        raise TypeError(f"Unsupported curve kind: {type(curve).__name__}")

    # --- Deposits ---

    def deposit_x_amount(self, pool: PoolSnapshot, y: int) -> int:
        """X needed alongside ``y`` at the current pool ratio."""
        return constant_product.proportional_amount(y, pool.y, pool.x)

    def deposit_y_amount(self, pool: PoolSnapshot, x: int) -> int:
        """Y needed alongside ``x`` at the current pool ratio."""
        return constant_product.proportional_amount(x, pool.x, pool.y)

    def deposit_amounts(self, pool: PoolSnapshot, x_max: int, y_max: int) -> tuple[int, int]:
        """Largest ratio-preserving deposit within both caps.

        Returns (0, 0) for an uninitialized pool or a non-positive cap; an
        empty pool is never seeded through this path.
        """
        if not pool.is_initialized or x_max <= 0 or y_max <= 0:
            return 0, 0

        if self.deposit_x_amount(pool, y_max) > x_max:
            x = x_max
            y = S(self.deposit_y_amount(pool, x_max)).min(y_max).value
        else:
            y = y_max
            x = S(self.deposit_x_amount(pool, y_max)).min(x_max).value
        return x, y

    # --- Valuation ---

    def volume_to_value(
        self,
        pool: PoolSnapshot,
        primary_coin: str,
        primary_coin_price: float,
        tx: int,
        ty: int,
        x_info: TokenInfo,
        y_info: TokenInfo,
    ) -> float | None:
        """Value raw-unit amounts of X and Y in the primary coin's price unit.

        A side is anchored when it is the primary coin (``primary_coin_price``)
        or a recognized stable coin (1.0). The other side is derived through
        the spot price. Returns None if neither side can be anchored or the
        price is undefined.
        """
        x_decimals = x_info.display_decimals
        y_decimals = y_info.display_decimals

        price = self.spot_price(pool, x_decimals, y_decimals)
        if price == 0.0:
            return None

        vx = tx / 10**x_decimals
        vy = ty / 10**y_decimals

        px: float | None = None
        py: float | None = None

        if primary_coin == pool.x_coin:
            px = primary_coin_price
        elif x_info.is_stable_coin:
            px = 1.0

        if primary_coin == pool.y_coin:
            py = primary_coin_price
        elif y_info.is_stable_coin:
            py = 1.0

        if px is not None and py is None:
            py = px / price
        elif px is None and py is not None:
            px = py * price

        if px is None or py is None:
            logger.debug("valuation_unanchored", pool=pool.address)
            return None
        return px * vx + py * vy

    def tvl(
        self,
        pool: PoolSnapshot,
        primary_coin: str,
        primary_coin_price: float,
        x_info: TokenInfo,
        y_info: TokenInfo,
    ) -> float | None:
        """Total value locked (both reserves)."""
        return self.volume_to_value(
            pool, primary_coin, primary_coin_price, pool.x, pool.y, x_info, y_info
        )

    def trade_volume(
        self,
        pool: PoolSnapshot,
        primary_coin: str,
        primary_coin_price: float,
        x_info: TokenInfo,
        y_info: TokenInfo,
    ) -> float | None:
        """All-time traded value."""
        volume = pool.trade_volume
        return self.volume_to_value(
            pool,
            primary_coin,
            primary_coin_price,
            volume.total_x,
            volume.total_y,
            x_info,
            y_info,
        )

    def trade_volume_24h(
        self,
        pool: PoolSnapshot,
        primary_coin: str,
        primary_coin_price: float,
        x_info: TokenInfo,
        y_info: TokenInfo,
    ) -> float | None:
        """Traded value over the larger of the current and previous epoch."""
        volume = pool.trade_volume
        return self.volume_to_value(
            pool,
            primary_coin,
            primary_coin_price,
            volume.rolling_x(),
            volume.rolling_y(),
            x_info,
            y_info,
        )


# Engine with the default configuration
default_engine = PoolPricingEngine()
