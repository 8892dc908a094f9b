"""Exact arithmetic primitives for the pricing core.

- ScaledDecimal: integer-backed decimal values with explicit scale
- AccumulatorRatio: reward-per-unit accumulator compared by cross-multiplication
"""

from amm_pricing.math.accumulator import AccumulatorRatio
from amm_pricing.math.scaled_decimal import ScaledDecimal, format_numeric

__all__ = ["AccumulatorRatio", "ScaledDecimal", "format_numeric"]
