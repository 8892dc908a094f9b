"""Pricing error classes.

Numerical edge cases (empty reserves, unanchored valuations) are reported
through sentinel return values, not exceptions. The errors below cover
invalid caller input and pools that cannot be priced at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from amm_pricing.pricing.results import PoolUnavailableReason


class PricingError(Exception):
    """Base error for pricing and accounting operations."""

    pass


class InvalidInputError(PricingError, ValueError):
    """Caller supplied a value the core refuses to clamp."""

    pass


class InvalidDecimalError(InvalidInputError):
    """String is not a canonical non-negative decimal."""

    pass


class InvalidAmountError(InvalidInputError):
    """Trade or deposit amount is non-positive or exceeds u64."""

    pass


class InvalidSlippageError(InvalidInputError):
    """Slippage tolerance must be in range [0, 1]."""

    pass


class ScaleAlignmentError(PricingError):
    """Aligning a ScaledDecimal to a lower scale would lose precision."""

    pass


class PoolNotAvailableError(PricingError):
    """Pool cannot be quoted; inspect ``reason`` to branch."""

    def __init__(self, reason: PoolUnavailableReason, pool_address: str | None = None) -> None:
        self.reason = reason
        self.pool_address = pool_address
        detail = f" ({pool_address})" if pool_address else ""
        super().__init__(f"{reason.value}{detail}")


class StableSolverDidNotConverge(PricingError):
    """Newton-Raphson iteration exhausted its budget (strict mode only)."""

    pass
