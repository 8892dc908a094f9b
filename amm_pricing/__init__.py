"""AMM pricing and position accounting core."""

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.math import AccumulatorRatio, ScaledDecimal
from amm_pricing.pools import ConstantProductCurve, PoolSnapshot, StableCurve, TokenInfo
from amm_pricing.positions import PositionAccountant, PositionSnapshot
from amm_pricing.pricing import PoolPricingEngine, SwapDirection, SwapQuote

__version__ = "0.1.0"
__all__ = [
    "PoolPricingEngine",
    "PositionAccountant",
    "PoolSnapshot",
    "PositionSnapshot",
    "ConstantProductCurve",
    "StableCurve",
    "TokenInfo",
    "SwapDirection",
    "SwapQuote",
    "ScaledDecimal",
    "AccumulatorRatio",
    "PricingConfig",
    "DEFAULT_PRICING_CONFIG",
    "__version__",
]
