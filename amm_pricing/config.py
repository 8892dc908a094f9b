"""Pricing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from amm_pricing.constants import SLIPPAGE_SCALE, STABLE_MAX_ITERATIONS

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class PricingConfig:
    """Centralized configuration for the pricing core.

    The core keeps no ambient state: consumers build a config once and pass
    it to the engine and solvers they use.

    Attributes:
        max_iterations: Newton-Raphson step budget for the stable solvers
            (default: 256, matching the settlement contract)
        strict_convergence: If True, raise StableSolverDidNotConverge when the
            budget is exhausted. If False, return the last iterate.
        slippage_scale: Fixed-point scale for slippage multipliers (1e9)
    """

    max_iterations: int = STABLE_MAX_ITERATIONS
    strict_convergence: bool = False
    slippage_scale: int = SLIPPAGE_SCALE

    def __post_init__(self) -> None:
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.slippage_scale <= 0:
            raise ValueError(f"slippage_scale must be positive, got {self.slippage_scale}")

    @classmethod
    def from_env(cls) -> PricingConfig:
        """Build a config from environment variables.

        - AMM_PRICING_MAX_ITERATIONS: solver step budget (default: 256)
        - AMM_PRICING_STRICT_CONVERGENCE: raise on non-convergence (default: false)
        """
        max_iterations = int(
            os.environ.get("AMM_PRICING_MAX_ITERATIONS", str(STABLE_MAX_ITERATIONS))
        )
        strict = os.environ.get("AMM_PRICING_STRICT_CONVERGENCE", "false").lower() in _TRUTHY
        return cls(max_iterations=max_iterations, strict_convergence=strict)


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
