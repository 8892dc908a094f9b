"""Validated quote requests.

Amounts arriving from a UI or another service may be ints or decimal
strings. They are validated here once, before any pricing math runs.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from amm_pricing.constants import U64_MAX
from amm_pricing.errors import InvalidAmountError, InvalidSlippageError
from amm_pricing.pricing.results import SwapDirection

_AMOUNT_PATTERN = re.compile(r"[0-9]+")


def validate_trade_amount(value: Any) -> int:
    """Validate a trade amount: a positive integer no larger than u64 max.

    Args:
        value: Int or decimal integer string

    Returns:
        The amount as int

    Raises:
        InvalidAmountError: If value is not an integer in (0, 2^64-1]
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be an integer, got {value!r}")
    if isinstance(value, str):
        if _AMOUNT_PATTERN.fullmatch(value) is None:
            raise InvalidAmountError(f"Amount must be a decimal integer string: {value!r}")
        try:
            value = int(value)
        except ValueError as err:
            # Exceeds the interpreter's integer string conversion limit
            raise InvalidAmountError(f"Amount exceeds u64 max: {value[:32]}...") from err
    if not isinstance(value, int):
        raise InvalidAmountError(f"Amount must be int or string, got {type(value).__name__}")
    if value <= 0:
        raise InvalidAmountError(f"Amount must be positive: {value}")
    if value > U64_MAX:
        raise InvalidAmountError(f"Amount exceeds u64 max: {value} > 2^64-1")
    return value


def slippage_to_decimal(slippage: Any) -> Decimal:
    """Convert a slippage tolerance to an exact Decimal in [0, 1].

    Floats are converted through their shortest repr ("0.005"), not their
    binary expansion.

    Raises:
        InvalidSlippageError: If slippage is not a number in [0, 1]
    """
    if isinstance(slippage, bool):
        raise InvalidSlippageError(f"Slippage must be a number, got {slippage!r}")
    try:
        value = Decimal(str(slippage))
    except InvalidOperation as err:
        raise InvalidSlippageError(f"Slippage must be a number, got {slippage!r}") from err
    if not value.is_finite() or value < 0 or value > 1:
        raise InvalidSlippageError(f"Slippage must be in range [0, 1], got {slippage}")
    return value


# Positive u64 trade amount
TradeAmount = Annotated[
    int,
    BeforeValidator(validate_trade_amount),
    Field(description="Positive trade amount, at most 2^64-1"),
]


class QuoteRequest(BaseModel):
    """An exact-input swap quote request."""

    amount: TradeAmount
    direction: SwapDirection = SwapDirection.FORWARD
    slippage: float | None = Field(default=None, ge=0.0, le=1.0)

    model_config = {"frozen": True}
