"""Pool pricing: quotes, spot prices, deposits and valuation."""

from amm_pricing.pricing.engine import PoolPricingEngine, default_engine
from amm_pricing.pricing.requests import QuoteRequest, TradeAmount, validate_trade_amount
from amm_pricing.pricing.results import PoolUnavailableReason, SwapDirection, SwapQuote

__all__ = [
    "PoolPricingEngine",
    "default_engine",
    "QuoteRequest",
    "TradeAmount",
    "validate_trade_amount",
    "PoolUnavailableReason",
    "SwapDirection",
    "SwapQuote",
]
