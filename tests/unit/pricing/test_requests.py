"""Tests for quote request validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from amm_pricing.constants import U64_MAX
from amm_pricing.errors import InvalidAmountError, InvalidSlippageError
from amm_pricing.pricing.requests import QuoteRequest, slippage_to_decimal, validate_trade_amount
from amm_pricing.pricing.results import SwapDirection


class TestValidateTradeAmount:
    """Tests for trade amount validation."""

    def test_int(self):
        assert validate_trade_amount(100) == 100

    def test_string(self):
        assert validate_trade_amount("100") == 100

    def test_u64_max_accepted(self):
        assert validate_trade_amount(U64_MAX) == U64_MAX

    @pytest.mark.parametrize(
        "value",
        [0, -1, U64_MAX + 1, "0", "abc", "1.5", 1.5, None, True, "1_000", " 7 ", "7\n", "+7", "\uff17"],
    )
    def test_rejected(self, value):
        with pytest.raises(InvalidAmountError):
            validate_trade_amount(value)

    def test_digit_string_is_exact(self):
        """Only plain ASCII digits are read; separators are not stripped."""
        assert validate_trade_amount("1000") == 1000
        with pytest.raises(InvalidAmountError):
            validate_trade_amount("1_000")

    def test_oversized_digit_string(self):
        with pytest.raises(InvalidAmountError):
            validate_trade_amount("9" * 10_000)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_trade_amount(0)


class TestSlippageToDecimal:
    """Tests for slippage conversion."""

    def test_float_uses_shortest_repr(self):
        assert slippage_to_decimal(0.005) == Decimal("0.005")

    def test_bounds_inclusive(self):
        assert slippage_to_decimal(0) == 0
        assert slippage_to_decimal(1) == 1

    @pytest.mark.parametrize("value", [-0.1, 1.5, float("nan"), float("inf"), "abc", True])
    def test_rejected(self, value):
        with pytest.raises(InvalidSlippageError):
            slippage_to_decimal(value)


class TestQuoteRequest:
    """Tests for the pydantic request model."""

    def test_defaults(self):
        request = QuoteRequest(amount=100)
        assert request.direction == SwapDirection.FORWARD
        assert request.slippage is None

    def test_string_amount_and_direction(self):
        request = QuoteRequest.model_validate({"amount": "250", "direction": "reverse"})
        assert request.amount == 250
        assert request.direction == SwapDirection.REVERSE

    @pytest.mark.parametrize("amount", [0, -5, U64_MAX + 1, "x", "1_000", " 7 "])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValidationError):
            QuoteRequest(amount=amount)

    def test_invalid_slippage(self):
        with pytest.raises(ValidationError):
            QuoteRequest(amount=1, slippage=1.5)

    def test_frozen(self):
        request = QuoteRequest(amount=1)
        with pytest.raises(ValidationError):
            request.amount = 2  # type: ignore[misc]
