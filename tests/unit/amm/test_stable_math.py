"""Tests for stable-swap invariant and output solvers."""

import pytest

from amm_pricing.amm.constant_product import get_amount_out
from amm_pricing.amm.stable_math import (
    compute_d,
    compute_d_decimal,
    compute_y,
    compute_y_decimal,
    compute_y_scaled,
    price_rational,
)
from amm_pricing.config import PricingConfig
from amm_pricing.errors import StableSolverDidNotConverge


class TestComputeD:
    """Tests for the invariant solver."""

    def test_balanced_reserves(self):
        """Balanced reserves: D equals the sum of balances."""
        assert compute_d(1_000_000, 1_000_000, 100) == 2_000_000

    def test_symmetric(self):
        assert compute_d(1_000_000, 3_000_000, 50) == compute_d(3_000_000, 1_000_000, 50)

    def test_skewed_below_sum(self):
        """Imbalance lowers D below b + q."""
        d = compute_d(1_000_000, 3_000_000, 50)
        assert 0 < d < 4_000_000

    def test_zero_reserves(self):
        assert compute_d(0, 0, 100) == 0

    def test_one_sided_zero(self):
        assert compute_d(0, 1_000_000, 100) == 0

    def test_decimal_variant_normalizes(self):
        # 1 unit at 6 decimals and 1 unit at 9 decimals
        assert compute_d_decimal(10**6, 10**9, 100, 6, 9) == compute_d(10**9, 10**9, 100)


class TestComputeY:
    """Tests for the output solver."""

    def test_small_trade_near_one_to_one(self):
        out = compute_y(1_000, 1_000_000, 1_000_000, 100)
        assert 990 < out < 1_000

    def test_rounding_bias_keeps_one_unit(self):
        """A balanced pool never pays out the full input."""
        assert compute_y(1_000, 1_000_000, 1_000_000, 100) <= 999

    def test_flatter_than_constant_product(self):
        dx = 100_000
        stable_out = compute_y(dx, 1_000_000, 1_000_000, 100)
        assert stable_out > get_amount_out(dx, 1_000_000, 1_000_000)

    def test_monotonic(self):
        outputs = [compute_y(dx, 1_000_000, 1_000_000, 100) for dx in (1, 10, 100, 1_000, 10_000)]
        assert outputs == sorted(outputs)

    def test_tiny_input_not_executable(self):
        """The one-unit bias can leave nothing for a dust trade."""
        assert compute_y(1, 1_000_000, 1_000_000, 100) <= 0

    def test_scaled_identity(self):
        assert compute_y_scaled(1_000, 10**6, 10**6, 100, 1, 1) == compute_y(
            1_000, 10**6, 10**6, 100
        )

    def test_scaled_output_in_output_units(self):
        # X has 6 decimals, Y has 9: X is raised by 1000 onto Y's scale
        out = compute_y_scaled(1_000, 10**6, 10**9, 100, 1_000, 1)
        assert 990_000 < out < 1_000_000

    def test_decimal_variant_matches_scaled(self):
        assert compute_y_decimal(1_000, 10**6, 10**9, 100, 6, 9) == compute_y_scaled(
            1_000, 10**6, 10**9, 100, 1_000, 1
        )


class TestConvergence:
    """Tests for the iteration budget and convergence policy."""

    def test_best_effort_returns_estimate(self, captured_logs):
        config = PricingConfig(max_iterations=1)
        d = compute_d(1, 10**12, 1, config)
        assert d > 0
        events = [log["event"] for log in captured_logs]
        assert "stable_solver_not_converged" in events

    def test_strict_raises(self):
        config = PricingConfig(max_iterations=1, strict_convergence=True)
        with pytest.raises(StableSolverDidNotConverge):
            compute_d(1, 10**12, 1, config)

    def test_strict_converging_run_does_not_raise(self):
        config = PricingConfig(strict_convergence=True)
        assert compute_d(1_000_000, 1_000_000, 100, config) == 2_000_000

    def test_default_budget_converges_quietly(self, captured_logs):
        compute_d(1_000_000, 3_000_000, 50)
        assert not [log for log in captured_logs if log["log_level"] == "warning"]


class TestPriceRational:
    """Tests for the marginal price fraction."""

    def test_balanced_is_one(self):
        pn, pd = price_rational(10**6, 10**6, 100, 6, 6)
        assert pn == pd

    def test_balanced_across_decimals(self):
        pn, pd = price_rational(10**6, 10**9, 100, 6, 9)
        assert pn == pd

    def test_abundant_x_is_cheaper(self):
        pn, pd = price_rational(3 * 10**6, 10**6, 100, 6, 6)
        assert pn < pd
